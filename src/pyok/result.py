"""Building `Result` values from nullable values, raising callables and do blocks.

Example:
```python
>>> from pyok import Ok, result
>>> result.of(0, "missing")
Ok(value=0)
>>> result.from_throwable(int, "x").is_err()
True
>>> result.sequence([Ok(1), Ok(2)])
Ok(value=[1, 2])

```
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Any, cast, overload

from ._core import func_name
from ._results import Err, Ok, Result, run_do, run_do_async

log = logging.getLogger(__name__)

__all__ = [
    "Err",
    "Ok",
    "Result",
    "do",
    "do_async",
    "from_",
    "from_throwable",
    "of",
    "sequence",
    "traverse",
]


def of[T, E](value: T | None, error: E) -> Result[T, E]:
    """
    Converts a nullable value into a `Result`, using error when the value is missing.

    Only `None` is missing: falsy values such as `0`, `""` or `float("nan")` are wrapped in `Ok`.

    Args:
        value: The value to wrap.
        error: The error to use if value is `None`.

    Returns:
        `Err(error)` if value is `None`, otherwise `Ok(value)`.

    Example:
        ```python
        >>> from pyok import result
        >>> result.of(42, "missing")
        Ok(value=42)
        >>> result.of(None, "missing")
        Err(error='missing')

        ```
    """
    return Err(error) if value is None else Ok(value)


def from_[**P, T, E](
    fn: Callable[P, T | None], error: E, *args: P.args, **kwargs: P.kwargs
) -> Result[T, E]:
    """
    Calls a function and converts its return value into a `Result`, using error on failure.

    If the function returns `None` or raises an `Exception`, `Err(error)` is returned: the exception never propagates.
    Use `from_throwable` to keep the exception instead.
    Named `from_` since `from` is a reserved word.

    Args:
        fn: The function to call.
        error: The error to use if fn fails.
        *args: Positional arguments to pass to fn.
        **kwargs: Keyword arguments to pass to fn.

    Returns:
        `Ok(fn(*args, **kwargs))`, or `Err(error)`.

    Example:
        ```python
        >>> from pyok import result
        >>> result.from_(int, "not a number", "42")
        Ok(value=42)
        >>> result.from_(int, "not a number", "forty-two")
        Err(error='not a number')
        >>> result.from_({"a": 1}.get, "no such key", "b")
        Err(error='no such key')

        ```
    """
    try:
        value = fn(*args, **kwargs)
    except Exception as exc:  # noqa: BLE001
        log.debug(
            "%s raised %s, converted to Err", func_name(fn), type(exc).__name__
        )
        return Err(error)
    return of(value, error)


def from_throwable[**P, T](
    fn: Callable[P, T], *args: P.args, **kwargs: P.kwargs
) -> Result[T, Exception]:
    """
    Calls a function, wrapping its return value in `Ok`, or the `Exception` it raised in `Err`.

    Unlike `from_`, a `None` return value is a success.
    Exceptions outside of `Exception` (`KeyboardInterrupt`, `SystemExit`...) are not caught.

    Args:
        fn: The function to call.
        *args: Positional arguments to pass to fn.
        **kwargs: Keyword arguments to pass to fn.

    Returns:
        `Ok(fn(*args, **kwargs))`, or `Err(exception)`.

    Example:
        ```python
        >>> from pyok import result
        >>> result.from_throwable(int, "42")
        Ok(value=42)
        >>> result.from_throwable(lambda: None)
        Ok(value=None)
        >>> result.from_throwable(int, "x")
        Err(error=ValueError("invalid literal for int() with base 10: 'x'"))

        ```
    """
    try:
        return Ok(fn(*args, **kwargs))
    except Exception as exc:  # noqa: BLE001
        log.debug("%s raised %s, captured as Err", func_name(fn), type(exc).__name__)
        return Err(exc)


def sequence[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """
    Turns an iterable of results into a result of a list.

    Stops consuming the iterable at the first `Err`, which is returned.

    Args:
        results: The results to collect, in order.

    Returns:
        `Ok` of every value in order, or the first `Err`.

    Example:
        ```python
        >>> from pyok import Err, Ok, result
        >>> result.sequence([])
        Ok(value=[])
        >>> result.sequence([Ok(1), Err("first"), Err("second")])
        Err(error='first')

        ```
    """
    values: list[T] = []
    for res in results:
        if res.is_err():
            return cast(Result[list[T], E], res)
        values.append(res.unwrap())
    return Ok(values)


def traverse[T, U, E](
    items: Iterable[T], f: Callable[[T], Result[U, E]]
) -> Result[list[U], E]:
    """
    Applies f to every item and collects the values, stopping at the first `Err`.

    f is never called on the items after the first failure.

    Example:
        ```python
        >>> from pyok import result
        >>> result.traverse(["1", "2"], lambda s: result.from_(int, s, s))
        Ok(value=[1, 2])
        >>> result.traverse(["1", "x", "y"], lambda s: result.from_(int, s, s))
        Err(error='x')

        ```
    """
    return sequence(f(item) for item in items)


@overload
def do[T, E](
    block: Callable[[], Awaitable[Result[T, E]]],
) -> Awaitable[Result[T, E]]: ...
@overload
def do[T, E](block: Callable[[], Result[T, E]]) -> Result[T, E]: ...
def do(block: Callable[[], Any]) -> Any:
    """
    Runs a block of code that extracts `Ok` values with `bind`, stopping at the first `Err`.

    The block evaluates to its own return value, or to the first `Err` a `bind` call hits:
    nothing after that call runs. This is equivalent to chaining `and_then` calls.

    Exceptions raised by the block itself are not converted: they propagate.
    If the block is asynchronous, an awaitable is returned instead.

    Args:
        block: A function taking no argument and returning a `Result`.

    Returns:
        The result returned by block, or the first `Err` bound.

    Raises:
        TypeError: If block does not return a `Result`.

    Example:
        ```python
        >>> from pyok import Err, Ok, result
        >>> def parse(s: str) -> result.Result[int, str]:
        ...     return result.from_(int, f"bad input: {s!r}", s)
        >>> def add(a: str, b: str) -> result.Result[int, str]:
        ...     return result.do(lambda: Ok(parse(a).bind() + parse(b).bind()))
        >>> add("1", "2")
        Ok(value=3)
        >>> add("1", "two")
        Err(error="bad input: 'two'")

        ```
    """
    return run_do(block, Result)


async def do_async[T, E](
    block: Callable[[], Awaitable[Result[T, E]] | Result[T, E]],
) -> Result[T, E]:
    """
    Coroutine version of `do`, accepting both synchronous and asynchronous blocks.

    Suspends only where the block awaits. Once an awaited computation resolves, `bind` short-circuits as in `do`.

    Args:
        block: A function taking no argument and returning a `Result` or an awaitable of one.

    Returns:
        The result returned by block, or the first `Err` bound.
    """
    return await run_do_async(block, Result)
