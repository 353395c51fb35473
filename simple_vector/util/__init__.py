from simple_vector.util.cursor import ConstCursor, Cursor
from simple_vector.util.array_ptr import ArrayPtr
