from typing import Any, Union, Optional, List, Callable, TypeVar, Generic, cast
from typing_extensions import Protocol
from abc import abstractmethod
from numbers import Number
from copy import deepcopy
import logging

from vec.util.errors import InvalidArgument, SizeMismatch
from vec.util.vector import VectorBase, as_integer


logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------


MAX_VECTOR_SIZE = 100000000

_UNSET: 'Any' = object()


class _IsScalar(Protocol):
    @abstractmethod
    def __add__(self, other):
        pass

    @abstractmethod
    def __sub__(self, other):
        pass

    @abstractmethod
    def __mul__(self, other):
        pass


_T = TypeVar('_T', bound=_IsScalar)


# -----------------------------------------------------------------------------


class TVector(Generic[_T], VectorBase[_T]):
    """ Numeric vector of fixed size with an offset start index.

        `TVector(size, start_index)` creates a vector of `size` zeros, whose
        valid logical indices are `start_index ... start_index + size - 1`.
        `TVector(other)` creates an independent copy of `other`.
        Sizes, start indices and indices may be any integer-like value
        implementing `__index__` except `bool`.

        Supported operators:
            v + s, v - s, v * s   element-wise with a scalar, new vector
            s + v, s * v          same as v + s, v * s
            v + w, v - w          element-wise by position, new vector
            v * w                 dot product, scalar
            v == w, v != w        by size and elements, start index ignored

        Binary operations on vectors of different sizes raise `SizeMismatch`.
        Python assignment only rebinds names, so whole-vector assignment
        is spelled `v.assign(w)`.
    """

    def __init__(self, size: 'Union[int, TVector[_T]]', start_index: 'int' = _UNSET,
                 *, zero: 'Any' = _UNSET) -> 'None':
        super().__init__()
        if isinstance(size, TVector):
            if start_index is not _UNSET:
                logger.debug("rejected start index %r for a copied vector", start_index)
                raise InvalidArgument('start index', start_index, "cannot be given when copying a vector")
            if zero is not _UNSET:
                logger.debug("rejected zero %r for a copied vector", zero)
                raise InvalidArgument('zero', zero, "cannot be given when copying a vector")
            self.__start_index: 'int' = size.__start_index
            self.__elements: 'List[_T]' = list(size.__elements)
            return
        count = _check_size(size)
        self.__start_index = 0 if start_index is _UNSET else _check_start_index(start_index)
        self.__elements = [0 if zero is _UNSET else zero] * count

    def _get_count(self) -> 'int':
        return len(self.__elements)

    def _get_start_index(self) -> 'int':
        return self.__start_index

    def _get_element(self, offset: 'int') -> '_T':
        return self.__elements[offset]

    def _set_element(self, offset: 'int', e: '_T') -> 'None':
        self.__elements[offset] = e

    def copy(self) -> 'TVector[_T]':
        return TVector(self)

    def __copy__(self) -> 'TVector[_T]':
        return TVector(self)

    def __deepcopy__(self, memo) -> 'TVector[_T]':
        v: 'TVector[_T]' = TVector(self)
        memo[id(self)] = v
        v.__elements = deepcopy(self.__elements, memo)
        return v

    def assign(self, other: 'TVector[_T]') -> 'TVector[_T]':
        """ Replaces size, start index and elements with copies of `other`'s.
            Assigning the vector to itself changes nothing.
            Returns the vector itself.
        """
        if not isinstance(other, TVector):
            raise TypeError(f"cannot assign {type(other).__name__} to TVector")
        if other is self:
            return self
        if len(other.__elements) != len(self.__elements):
            logger.debug("assignment resizes vector from %d to %d",
                         len(self.__elements), len(other.__elements))
        elements = list(other.__elements)
        self.__start_index, self.__elements = other.__start_index, elements
        return self

    def __eq__(self, other) -> 'bool':
        if not isinstance(other, TVector):
            return NotImplemented
        if other is self:
            return True
        return self.__elements == other.__elements

    __hash__ = None  # type: ignore

    def __add__(self, other):
        return self.__combine(other, lambda x, y: x + y)

    def __sub__(self, other):
        return self.__combine(other, lambda x, y: x - y)

    def __mul__(self, other):
        if isinstance(other, TVector):
            self.__check_same_size(other)
            return sum(x * y for x, y in zip(self.__elements, other.__elements))
        return self.__combine(other, lambda x, y: x * y)

    def __radd__(self, other):
        if isinstance(other, Number):
            return self.__combine(other, lambda x, y: y + x)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Number):
            return self.__combine(other, lambda x, y: y * x)
        return NotImplemented

    def __combine(self, other: 'Any', op: 'Callable[[Any, Any], Any]'):
        if isinstance(other, TVector):
            self.__check_same_size(other)
            elements = [op(x, y) for x, y in zip(self.__elements, other.__elements)]
        elif isinstance(other, Number):
            elements = [op(x, other) for x in self.__elements]
        else:
            return NotImplemented
        v: 'TVector[_T]' = TVector(self)
        v.__elements = cast('List[_T]', elements)
        return v

    def __check_same_size(self, other: 'TVector[_T]') -> 'None':
        if len(self.__elements) != len(other.__elements):
            logger.debug("rejected operation on vectors of sizes %d and %d",
                         len(self.__elements), len(other.__elements))
            raise SizeMismatch(len(self.__elements), len(other.__elements))

    def __repr__(self) -> 'str':
        return f"TVector(size={len(self.__elements)}, start_index={self.__start_index}, {self.__elements!r})"


# -----------------------------------------------------------------------------


def _check_size(size: 'Any') -> 'int':
    problem: 'Optional[str]' = None
    try:
        count = as_integer(size, "sizes")
    except TypeError:
        problem = "must be an integer"
    else:
        if count < 1:
            problem = "must be positive"
        elif count > MAX_VECTOR_SIZE:
            problem = f"must not exceed {MAX_VECTOR_SIZE}"
    if problem is not None:
        logger.debug("rejected size %r: %s", size, problem)
        raise InvalidArgument('size', size, problem)
    return count


def _check_start_index(start_index: 'Any') -> 'int':
    problem: 'Optional[str]' = None
    try:
        start = as_integer(start_index, "start indices")
    except TypeError:
        problem = "must be an integer"
    else:
        if start < 0:
            problem = "must not be negative"
    if problem is not None:
        logger.debug("rejected start index %r: %s", start_index, problem)
        raise InvalidArgument('start index', start_index, problem)
    return start


# -----------------------------------------------------------------------------
