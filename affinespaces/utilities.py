"""Very general-purpose utilities"""

import functools
from itertools import tee
from typing import Callable, Iterable, Optional, ParamSpec, TypeVar

from expression import Result, compose, curry_flip

_A = TypeVar("_A")
_P = ParamSpec("_P")
_T = TypeVar("_T", bound=type)

_Exception = TypeVar("_Exception", bound=Exception)


@curry_flip(1)
def wrap_exception(
    fun: Callable[_P, _A],
    exc: type[_Exception] | tuple[type[_Exception], ...] = Exception,
) -> Callable[_P, Result[_A, _Exception]]:
    """Wrap a function that might raise an Exception in a Result monad

    Args:
        fun (Callable[P, a]):
            The function to be wrapped.
        exc (Union[Tuple[Type[Exception], ...], Type[Exception]], optional):
            The Exception types to be wrapped into the monad. Defaults to Exception.

    Returns:
        Callable[P, Result[a, Exception]]: 
            The decorated function.

    Examples:
        >>> @wrap_exception(WeightSumError)
        ... def combine(*weights: float) -> AffinePoint:
        ...     return subspace[weights]
        >>> t: Result[AffinePoint, WeightSumError] = combine(0.5, 0.6)
    """

    @functools.wraps(fun)
    def _wrapper(*args: _P.args, **kwargs: _P.kwargs) -> Result[_A, _Exception]:
        try:
            return Result[_A, _Exception].Ok(fun(*args, **kwargs))
        except exc as e:
            return Result[_A, _Exception].Error(e)

    return _wrapper


@curry_flip(1)
def wrap_error_message(
    fun: Callable[_P, Result[_A, _Exception]],
    context: Optional[str] = None,
) -> Callable[_P, Result[_A, str]]:
    write_error: Callable[[_Exception], str] = \
        str if context is None else (lambda e: f"{context}: {e}")
    def transform(either: Result[_A, _Exception]) -> Result[_A, str]:
        return either.map_error(write_error)
    return compose(fun, transform)


@curry_flip(1)
def check_all_of_type(xs: Iterable[_A], t: _T) -> None:
    for x in tee(xs, 1)[0]:
        if not isinstance(x, t):
            raise TypeError(f"First item not of type {t.__name__} is of type {type(x).__name__}")
