from simple_vector.errors import OutOfRangeError
from simple_vector.reserve import ReserveProxyObj, reserve
from simple_vector.util import ArrayPtr, ConstCursor, Cursor
from simple_vector.vector import GROWTH_FACTOR, VectorBase, SimpleVector
