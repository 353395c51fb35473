class ReserveProxyObj:
    """ Request to create an empty vector with preallocated capacity.

        Passing the proxy instead of a plain number tells the vector
        constructor apart from the one that takes the number of elements.
    """

    def __init__(self, capacity_to_reserve: 'int') -> 'None':
        if capacity_to_reserve < 0:
            raise ValueError(f"Cannot reserve {capacity_to_reserve} slots")
        self.__capacity_to_reserve = capacity_to_reserve

    @property
    def capacity_to_reserve(self) -> 'int':
        return self.__capacity_to_reserve

    def __eq__(self, other) -> 'bool':
        if not isinstance(other, ReserveProxyObj):
            return NotImplemented
        return self.capacity_to_reserve == other.capacity_to_reserve

    def __hash__(self) -> 'int':
        return hash(self.capacity_to_reserve)

    def __repr__(self) -> 'str':
        return f"reserve({self.capacity_to_reserve})"


def reserve(capacity_to_reserve: 'int') -> 'ReserveProxyObj':
    return ReserveProxyObj(capacity_to_reserve)
