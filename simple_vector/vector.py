import logging
from typing import Any, Optional, Iterable, Iterator, Callable, TypeVar, Generic
from typing_extensions import Protocol
from abc import ABC, abstractmethod

from simple_vector.errors import OutOfRangeError
from simple_vector.reserve import ReserveProxyObj, reserve
from simple_vector.util import ArrayPtr, ConstCursor, Cursor


logger = logging.getLogger(__name__)

GROWTH_FACTOR = 2


# -----------------------------------------------------------------------------


class _IsOrderable(Protocol):
    @abstractmethod
    def __lt__(self, other) -> 'bool':
        pass


_E = TypeVar('_E')


class VectorBase(Generic[_E], ABC):
    """ Sequence protocol and relational operators shared by vectors.

        Subclasses provide the storage primitives: the number of live
        elements and access to a live slot by its index.
    """

    @abstractmethod
    def _get_count(self) -> 'int':
        pass

    @abstractmethod
    def _get_element(self, index: 'int') -> '_E':
        pass

    @abstractmethod
    def _set_element(self, index: 'int', e: '_E') -> 'None':
        pass

    def at(self, index: 'int') -> '_E':
        """ Returns the element with the specified `index`.
            Raises `OutOfRangeError` unless `0 <= index < len(self)`.
        """
        return self._get_element(self.__check_index(index))

    def set_at(self, index: 'int', e: '_E') -> 'None':
        """ Replaces the element with the specified `index`.
            Raises `OutOfRangeError` unless `0 <= index < len(self)`.
        """
        self._set_element(self.__check_index(index), e)

    def __getitem__(self, index: 'int') -> '_E':
        return self._get_element(self.__normalize_index(index))

    def __setitem__(self, index: 'int', e: '_E') -> 'None':
        self._set_element(self.__normalize_index(index), e)

    def __iter__(self) -> 'Iterator[_E]':
        return (self._get_element(i) for i in range(self._get_count()))

    def __reversed__(self) -> 'Iterator[_E]':
        return (self._get_element(i) for i in reversed(range(self._get_count())))

    def __len__(self) -> 'int':
        return self._get_count()

    def __eq__(self, other) -> 'bool':
        if not isinstance(other, VectorBase):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    def __ne__(self, other) -> 'bool':
        if not isinstance(other, VectorBase):
            return NotImplemented
        return not self == other

    def __lt__(self, other) -> 'bool':
        if not isinstance(other, VectorBase):
            return NotImplemented
        return _lexicographical_less(self, other)

    def __gt__(self, other) -> 'bool':
        if not isinstance(other, VectorBase):
            return NotImplemented
        return _lexicographical_less(other, self)

    def __le__(self, other) -> 'bool':
        if not isinstance(other, VectorBase):
            return NotImplemented
        return not _lexicographical_less(other, self)

    def __ge__(self, other) -> 'bool':
        if not isinstance(other, VectorBase):
            return NotImplemented
        return not _lexicographical_less(self, other)

    __hash__ = None  # type: ignore

    def __normalize_index(self, index: 'int') -> 'int':
        if index < 0:
            count = self._get_count()
            if index + count >= 0:
                return index + count
        return self.__check_index(index)

    def __check_index(self, index: 'int') -> 'int':
        count = self._get_count()
        if index < 0 or index >= count:
            raise OutOfRangeError(index, count)
        return index


def _lexicographical_less(lhs: 'VectorBase[Any]', rhs: 'VectorBase[Any]') -> 'bool':
    for a, b in zip(lhs, rhs):
        x: '_IsOrderable' = a
        y: '_IsOrderable' = b
        if x < y:
            return True
        if y < x:
            return False
    return len(lhs) < len(rhs)


# -----------------------------------------------------------------------------


_NOTHING: 'Any' = object()


class SimpleVector(Generic[_E], VectorBase[_E]):
    """ Growable contiguous sequence of elements.

        The vector owns a region of `capacity` slots, of which the first
        `size` hold the elements. Appending to a full vector reallocates
        the region with `GROWTH_FACTOR` times more slots, so a series of
        `push_back` calls takes amortized constant time.

        Any reallocation invalidates cursors obtained earlier. Insertion
        and erasure invalidate cursors at and after the affected position.
    """

    def __init__(self, init: 'Any' = None, value: 'Any' = _NOTHING, *,
                 factory: 'Optional[Callable[[], _E]]' = None) -> 'None':
        """ Creates new vector.

            `init` selects the way of construction:
            - `None` creates an empty vector;
            - an `int` creates a vector of `init` elements, each equal to
              `value` if given or produced by `factory` otherwise;
            - a `ReserveProxyObj` creates an empty vector with preallocated
              capacity;
            - another `SimpleVector` creates its copy;
            - any other iterable creates a vector of its elements.

            `factory` produces default elements for `resize`. When it is
            not given the default element is `None`.
        """
        super().__init__()
        self.__items: 'ArrayPtr[_E]' = ArrayPtr()
        self.__size = 0
        self.__capacity = 0
        self.__factory = factory
        if value is not _NOTHING and not isinstance(init, int):
            raise TypeError("Fill value requires the number of elements")
        if init is None:
            pass
        elif isinstance(init, ReserveProxyObj):
            self.reserve(init.capacity_to_reserve)
        elif isinstance(init, SimpleVector):
            if factory is None:
                self.__factory = init.__factory
            self.__assign_elements(init, len(init), init.capacity)
        elif isinstance(init, int):
            if init < 0:
                raise ValueError(f"Cannot create vector of {init} elements")
            if value is _NOTHING:
                elements = [self.__make_default() for _ in range(init)]
            else:
                elements = [value] * init
            self.__assign_elements(elements, init, init)
        else:
            elements = list(init)
            self.__assign_elements(elements, len(elements), len(elements))

    @classmethod
    def with_length(cls, size: 'int', value: 'Any' = _NOTHING, *,
                    factory: 'Optional[Callable[[], _E]]' = None) -> 'SimpleVector[_E]':
        return cls(size, value, factory=factory)

    @classmethod
    def with_capacity(cls, capacity: 'int', *,
                      factory: 'Optional[Callable[[], _E]]' = None) -> 'SimpleVector[_E]':
        return cls(reserve(capacity), factory=factory)

    @classmethod
    def move_from(cls, other: 'SimpleVector[_E]') -> 'SimpleVector[_E]':
        """ Creates new vector that takes the region of `other`,
            leaving `other` empty. Does not allocate.
        """
        v = cls(factory=other.__factory)
        v.__items = ArrayPtr.adopt(other.__items.release())
        v.__size, other.__size = other.__size, 0
        v.__capacity, other.__capacity = other.__capacity, 0
        return v

    def assign(self, other: 'SimpleVector[_E]') -> 'SimpleVector[_E]':
        """ Replaces the contents with the copy of `other`.
            The vector is left intact if the copy cannot be allocated.
        """
        if other is not self:
            tmp = SimpleVector(other)
            self.swap(tmp)
        return self

    def move_assign(self, other: 'SimpleVector[_E]') -> 'SimpleVector[_E]':
        """ Replaces the contents with the ones of `other`, leaving `other` empty.
        """
        if other is not self:
            self.swap(other)
            other.__items.release()
            other.__size = other.__capacity = 0
        return self

    @property
    def size(self) -> 'int':
        return self.__size

    @property
    def capacity(self) -> 'int':
        return self.__capacity

    @property
    def is_empty(self) -> 'bool':
        return self.__size == 0

    def clear(self) -> 'None':
        """ Makes the vector empty, keeping its capacity.
        """
        self.__size = 0

    def reserve(self, new_capacity: 'int') -> 'None':
        """ Makes room for at least `new_capacity` elements.
            Never shrinks the region.
        """
        if new_capacity > self.__capacity:
            self.__reallocate(new_capacity)

    def resize(self, new_size: 'int') -> 'None':
        """ Changes the number of elements. New elements are produced by
            the factory of the vector.
        """
        if new_size < 0:
            raise ValueError(f"Cannot resize vector to {new_size} elements")
        if new_size > self.__capacity:
            self.__reallocate(max(new_size, GROWTH_FACTOR * self.__capacity))
        for i in range(self.__size, new_size):
            self.__items[i] = self.__make_default()
        self.__size = new_size

    def push_back(self, e: '_E') -> 'None':
        if self.__size == self.__capacity:
            self.__grow(self.__size + 1)
        self.__items[self.__size] = e
        self.__size += 1

    append = push_back

    def pop_back(self) -> 'None':
        """ Removes the last element. Does nothing if the vector is empty.
        """
        if self.__size > 0:
            self.__size -= 1

    def insert(self, pos: 'ConstCursor[_E]', e: '_E') -> 'Cursor[_E]':
        """ Inserts `e` before `pos` and returns the cursor to it.
            `pos` must lie within `[begin(), end()]`.
        """
        index = self.__index_of(pos)
        assert 0 <= index <= self.__size
        if self.__size == self.__capacity:
            self.__grow(self.__size + 1)
        items = self.__items
        for i in range(self.__size, index, -1):
            items[i] = items[i - 1]
        items[index] = e
        self.__size += 1
        return self.begin() + index

    def erase(self, pos: 'ConstCursor[_E]') -> 'Cursor[_E]':
        """ Removes the element at `pos` and returns the cursor to the
            element that followed it. `pos` must lie within `[begin(), end())`.
        """
        index = self.__index_of(pos)
        assert 0 <= index < self.__size
        items = self.__items
        for i in range(index, self.__size - 1):
            items[i] = items[i + 1]
        self.__size -= 1
        return self.begin() + index

    def swap(self, other: 'SimpleVector[_E]') -> 'None':
        self.__items.swap(other.__items)
        self.__size, other.__size = other.__size, self.__size
        self.__capacity, other.__capacity = other.__capacity, self.__capacity
        self.__factory, other.__factory = other.__factory, self.__factory

    def begin(self) -> 'Cursor[_E]':
        return self.__items.get()

    def end(self) -> 'Cursor[_E]':
        return self.__items.get() + self.__size

    def cbegin(self) -> 'ConstCursor[_E]':
        return self.begin().as_const()

    def cend(self) -> 'ConstCursor[_E]':
        return self.end().as_const()

    def copy(self) -> 'SimpleVector[_E]':
        return SimpleVector(self)

    __copy__ = copy

    def _get_count(self) -> 'int':
        return self.__size

    def _get_element(self, index: 'int') -> '_E':
        return self.__items[index]

    def _set_element(self, index: 'int', e: '_E') -> 'None':
        self.__items[index] = e

    def __repr__(self) -> 'str':
        return f"SimpleVector({list(self)!r})"

    def __make_default(self) -> '_E':
        return None if self.__factory is None else self.__factory()  # type: ignore

    def __index_of(self, pos: 'ConstCursor[_E]') -> 'int':
        assert pos.same_region(self.cbegin())
        return pos.offs

    def __assign_elements(self, elements: 'Iterable[_E]', size: 'int', capacity: 'int') -> 'None':
        tmp: 'ArrayPtr[_E]' = ArrayPtr(capacity)
        for i, e in zip(range(size), elements):
            tmp[i] = e
        self.__items.swap(tmp)
        self.__size, self.__capacity = size, capacity

    def __grow(self, required: 'int') -> 'None':
        if self.__capacity == 0:
            self.__reallocate(max(required, 1))
        else:
            self.__reallocate(max(required, GROWTH_FACTOR * self.__capacity))

    def __reallocate(self, new_capacity: 'int') -> 'None':
        tmp: 'ArrayPtr[_E]' = ArrayPtr(new_capacity)
        for i in range(self.__size):
            tmp[i] = self.__items[i]
        logger.debug(f"Reallocating vector storage: {self.__capacity} -> {new_capacity} slots")
        self.__items.swap(tmp)
        self.__capacity = new_capacity


# -----------------------------------------------------------------------------
