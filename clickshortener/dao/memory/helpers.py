import functools
from typing import TypeVar, Any
from collections.abc import Callable


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])


def synchronized[F](method: F) -> F:
    """Run a DAO method inside the instance's lock

    The instance must expose a reentrant `_lock`. Every state transition of an
    in-memory DAO goes through this decorator, which makes each call a single
    critical section over all of the DAO's structures.

    Args:
        method (Callable[..., Any]):
            DAO method reading or mutating shared state.

    Returns:
        Callable[..., Any]:
            Wrapped method holding `self._lock` for its whole duration.

    Example:
        >>> @synchronized
        ... def count(self):
        ...     return len(self._links)
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)

    return wrapper
