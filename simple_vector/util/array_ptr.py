from typing import Any, Optional, List, TypeVar, Generic

from simple_vector.util.cursor import Cursor


# -----------------------------------------------------------------------------


_E = TypeVar('_E')


class ArrayPtr(Generic[_E]):
    """ Owner of a contiguous region of slots.

        A pointer of size 0 holds no storage at all. Slots that have not
        been written yet hold `None`.
    """

    def __init__(self, size: 'int' = 0) -> 'None':
        """ Allocates the region of `size` slots.
            Raises `MemoryError` if the region cannot be allocated.
        """
        if size < 0:
            raise ValueError(f"Cannot allocate {size} slots")
        self.__raw: 'Optional[List[Any]]' = [None] * size if size > 0 else None

    @staticmethod
    def adopt(raw: 'Optional[List[Any]]') -> 'ArrayPtr[Any]':
        """ Returns the pointer that takes ownership of the region
            previously given away by `release`.
        """
        ptr: 'ArrayPtr[Any]' = ArrayPtr()
        ptr.__raw = raw if raw else None
        return ptr

    def release(self) -> 'Optional[List[Any]]':
        """ Gives away the region, leaving the pointer empty.
        """
        raw, self.__raw = self.__raw, None
        return raw

    def get(self) -> 'Cursor[_E]':
        """ Returns the cursor to the first slot of the region.
        """
        return Cursor(self.__raw, 0)

    def swap(self, other: 'ArrayPtr[_E]') -> 'None':
        self.__raw, other.__raw = other.__raw, self.__raw

    def __getitem__(self, index: 'int') -> '_E':
        assert self.__raw is not None
        return self.__raw[index]

    def __setitem__(self, index: 'int', e: '_E') -> 'None':
        assert self.__raw is not None
        self.__raw[index] = e

    def __len__(self) -> 'int':
        return 0 if self.__raw is None else len(self.__raw)

    def __bool__(self) -> 'bool':
        return self.__raw is not None

    def __repr__(self) -> 'str':
        return f"ArrayPtr({len(self)} slots)"


# -----------------------------------------------------------------------------
