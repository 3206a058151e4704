import logging
import threading
from collections.abc import Callable
from typing import Generic, TypeVar

from lazyseq.errors import ReentrantForceError

logger = logging.getLogger(__name__)

R = TypeVar('R')


class Thunk(Generic[R]):
    """
    A deferred computation that runs at most once.

    The first force runs the computation under a lock and caches the
    result; later forces return the cached value without locking.  The
    computation is released once it has run so anything it closes over
    can be collected.
    """

    __slots__ = '_compute', '_value', '_lock', '_forcing'

    def __init__(self, compute: Callable[[], R]) -> None:
        self._compute = compute
        self._value = None
        self._lock = threading.RLock()
        self._forcing = False

    @classmethod
    def evaluated(cls, value: R) -> 'Thunk[R]':
        thunk = cls.__new__(cls)
        thunk._compute = None
        thunk._value = value
        thunk._lock = None
        thunk._forcing = False
        return thunk

    @property
    def is_evaluated(self) -> bool:
        return self._compute is None

    def force(self) -> R:
        if self._compute is None:
            return self._value

        with self._lock:
            # Another thread may have finished while we waited
            if self._compute is None:
                return self._value

            # RLock lets the owning thread back in, which only happens
            # if the computation demands its own result.
            if self._forcing:
                logger.debug('re-entrant force of %r', self)
                raise ReentrantForceError.reentered(self, thunk=self)

            self._forcing = True
            try:
                value = self._compute()
            finally:
                self._forcing = False

            # _value must be written before _compute is cleared, since
            # the fast path reads them without the lock.
            self._value = value
            self._compute = None
            return value

    def __repr__(self):
        if self._compute is None:
            return f'Thunk.evaluated({self._value!r})'
        return '<Thunk ...>'


def defer(compute: Callable[[], R]) -> Thunk[R]:
    return Thunk(compute)

def force(thunk: Thunk[R]) -> R:
    return thunk.force()

def pure(value: R) -> Thunk[R]:
    return Thunk.evaluated(value)
