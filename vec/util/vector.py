from typing import Any, TypeVar, Generic
from operator import index as _index
from abc import ABC, abstractmethod
import logging

from vec.util.errors import OutOfRange


logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------


_E = TypeVar('_E')


class VectorBase(Generic[_E], ABC):
    """ Fixed-size vector addressed by logical indices.

        Logical indices start at `start_index` and cover `size` consecutive
        integers. Subclasses provide physical storage, addressed by offsets
        from 0 to `size - 1`; this class translates and validates indices.

        Vectors are not iterable: elements are reached through indexing only,
        and the sequence fallback of iterating over `__getitem__` is disabled.
    """

    @abstractmethod
    def _get_count(self) -> 'int':
        pass

    @abstractmethod
    def _get_start_index(self) -> 'int':
        pass

    @abstractmethod
    def _get_element(self, offset: 'int') -> '_E':
        pass

    @abstractmethod
    def _set_element(self, offset: 'int', e: '_E') -> 'None':
        pass

    @property
    def size(self) -> 'int':
        return self._get_count()

    @property
    def start_index(self) -> 'int':
        return self._get_start_index()

    def get_size(self) -> 'int':
        return self._get_count()

    def get_start_index(self) -> 'int':
        return self._get_start_index()

    def __setitem__(self, index: 'int', e: '_E') -> 'None':
        self._set_element(self.__to_offset(index), e)

    def __getitem__(self, index: 'int') -> '_E':
        return self._get_element(self.__to_offset(index))

    def __len__(self) -> 'int':
        return self._get_count()

    __iter__ = None

    def __to_offset(self, index: 'int') -> 'int':
        index = as_integer(index, "vector indices")
        start, count = self._get_start_index(), self._get_count()
        offset = index - start
        if offset < 0 or offset >= count:
            logger.debug("rejected index %d, valid range is [%d, %d)", index, start, start + count)
            raise OutOfRange(index, start, count)
        return offset


# -----------------------------------------------------------------------------


def as_integer(value: 'Any', what: 'str') -> 'int':
    """ Converts `value` to `int` through `__index__`, as sequences do.
        Booleans are not accepted.
    """
    if isinstance(value, bool):
        raise TypeError(f"{what} must be integers, not bool")
    try:
        return _index(value)
    except TypeError:
        raise TypeError(f"{what} must be integers, not {type(value).__name__}") from None


# -----------------------------------------------------------------------------
