class OutOfRangeError(IndexError):
    """ Raised on access to the element that lies outside of the live range of a vector.
    """

    def __init__(self, index: 'int', size: 'int', description: 'str' = "Index out of range of vector") -> 'None':
        super().__init__(f"{description}: index {index}, size {size}")
        self.__index, self.__size = index, size

    @property
    def index(self) -> 'int':
        return self.__index

    @property
    def size(self) -> 'int':
        return self.__size
