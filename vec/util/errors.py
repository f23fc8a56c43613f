from typing import Any


# -----------------------------------------------------------------------------


class VectorError(Exception):
    """ Base class of errors raised by vector operations.

        Errors are raised at the point of detection and are never recovered
        inside the library: the operation that failed leaves no side effects.
    """

    def __init__(self, description: 'str') -> 'None':
        super().__init__(description)
        self.__description = description

    @property
    def description(self) -> 'str':
        """ Returns the description of the error.
        """
        return self.__description

    def __str__(self) -> 'str':
        return self.__description


class InvalidArgument(VectorError, ValueError):
    """ Vector cannot be constructed with the requested size or start index.
    """

    def __init__(self, name: 'str', value: 'Any', description: 'str') -> 'None':
        super().__init__(f"invalid {name} {value!r}: {description}")
        self.name, self.value = name, value


class OutOfRange(VectorError, IndexError):
    """ Logical index lies outside of `[start_index, start_index + size)`.
    """

    def __init__(self, index: 'int', start_index: 'int', size: 'int') -> 'None':
        super().__init__(f"index {index} out of range [{start_index}, {start_index + size})")
        self.index, self.start_index, self.size = index, start_index, size


class SizeMismatch(VectorError, ValueError):
    """ Binary operation was applied to vectors of different sizes.
    """

    def __init__(self, left: 'int', right: 'int') -> 'None':
        super().__init__(f"vector sizes differ: {left} and {right}")
        self.left, self.right = left, right


# -----------------------------------------------------------------------------
