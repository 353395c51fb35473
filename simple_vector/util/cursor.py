from typing import Any, Optional, List, Union, TypeVar, Generic
from functools import total_ordering


# -----------------------------------------------------------------------------


_E = TypeVar('_E')


@total_ordering
class ConstCursor(Generic[_E]):
    """ Random-access position within a storage region of a vector.

        Cursor object encapsulates both the region and the offset within it.
        It is immutable, so moving along the region results in creation of
        new cursor objects.

        Cursors are hashable and comparable. Only cursors into the same
        region may be compared or subtracted.
    """

    def __init__(self, storage: 'Optional[List[Any]]', offs: 'int') -> 'None':
        """ Private constructor, should not be called outside the package.
            Use `begin`/`end` methods of a vector instead.
        """
        self.__storage, self.__offs = storage, offs

    @property
    def storage(self) -> 'Optional[List[Any]]':
        """ Returns the region the cursor points into (`None` for an empty region).
        """
        return self.__storage

    @property
    def offs(self) -> 'int':
        """ Returns offset in slots from the beginning of the region (starting at 0).
        """
        return self.__offs

    @property
    def value(self) -> '_E':
        """ Returns the element the cursor points to.
        """
        return self[0]

    @property
    def next(self) -> 'ConstCursor[_E]':
        return self + 1

    @property
    def prev(self) -> 'ConstCursor[_E]':
        return self - 1

    def same_region(self, other: 'ConstCursor[Any]') -> 'bool':
        return self.__storage is other.__storage

    def _moved(self, offs: 'int') -> 'ConstCursor[_E]':
        return type(self)(self.__storage, offs)

    def __getitem__(self, n: 'int') -> '_E':
        assert self.__storage is not None
        return self.__storage[self.__offs + n]

    def __add__(self, n: 'int') -> 'ConstCursor[_E]':
        if not isinstance(n, int):
            return NotImplemented
        return self._moved(self.__offs + n)

    __radd__ = __add__

    def __sub__(self, other: 'Union[int, ConstCursor[Any]]') -> 'Any':
        if isinstance(other, ConstCursor):
            assert self.same_region(other)
            return self.__offs - other.__offs
        if isinstance(other, int):
            return self._moved(self.__offs - other)
        return NotImplemented

    def __eq__(self, other) -> 'bool':
        if not isinstance(other, ConstCursor):
            return NotImplemented
        return self.same_region(other) and self.__offs == other.__offs

    def __lt__(self, other) -> 'bool':
        if not isinstance(other, ConstCursor):
            return NotImplemented
        assert self.same_region(other)
        return self.__offs < other.__offs

    def __hash__(self) -> 'int':
        return hash((id(self.__storage), self.__offs))

    def __repr__(self) -> 'str':
        return f"{type(self).__name__}(offs={self.__offs})"


class Cursor(ConstCursor[_E]):
    """ Cursor that also allows to replace the element it points to.
    """

    @property
    def value(self) -> '_E':
        return self[0]

    @value.setter
    def value(self, e: '_E') -> 'None':
        self[0] = e

    def __setitem__(self, n: 'int', e: '_E') -> 'None':
        storage = self.storage
        assert storage is not None
        storage[self.offs + n] = e

    def as_const(self) -> 'ConstCursor[_E]':
        return ConstCursor(self.storage, self.offs)


# -----------------------------------------------------------------------------
