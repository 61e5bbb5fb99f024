"""Building `Option` values from nullable values, fallible callables and do blocks.

Example:
```python
>>> from pyok import Some, option
>>> option.of(0)
Some(value=0)
>>> option.of(None)
NONE
>>> option.sequence([Some(1), Some(2)])
Some(value=[1, 2])

```
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Any, overload

from ._core import func_name
from ._results import NONE, NoneOption, Option, Some, run_do, run_do_async

log = logging.getLogger(__name__)

__all__ = [
    "NONE",
    "NoneOption",
    "Option",
    "Some",
    "do",
    "do_async",
    "from_",
    "of",
    "sequence",
    "traverse",
]


def of[T](value: T | None) -> Option[T]:
    """
    Converts a nullable value into an `Option`.

    Only `None` is absent: falsy values such as `0`, `""` or `float("nan")` are wrapped in `Some`.

    Args:
        value: The value to wrap.

    Returns:
        `NONE` if value is `None`, otherwise `Some(value)`.

    Example:
        ```python
        >>> from pyok import option
        >>> option.of(42)
        Some(value=42)
        >>> option.of("")
        Some(value='')
        >>> option.of({}.get("missing"))
        NONE

        ```
    """
    return NONE if value is None else Some(value)


def from_[**P, T](
    fn: Callable[P, T | None], *args: P.args, **kwargs: P.kwargs
) -> Option[T]:
    """
    Calls a function and converts its return value into an `Option`.

    If the function returns `None` or raises an `Exception`, `NONE` is returned: the exception never propagates.
    Named `from_` since `from` is a reserved word.

    Args:
        fn: The function to call.
        *args: Positional arguments to pass to fn.
        **kwargs: Keyword arguments to pass to fn.

    Returns:
        `Some(fn(*args, **kwargs))`, or `NONE`.

    Example:
        ```python
        >>> from pyok import option
        >>> option.from_(int, "42")
        Some(value=42)
        >>> option.from_(int, "forty-two")
        NONE
        >>> option.from_(lambda: None)
        NONE

        ```
    """
    try:
        value = fn(*args, **kwargs)
    except Exception as exc:  # noqa: BLE001
        log.debug(
            "%s raised %s, converted to NONE", func_name(fn), type(exc).__name__
        )
        return NONE
    return of(value)


def sequence[T](options: Iterable[Option[T]]) -> Option[list[T]]:
    """
    Turns an iterable of options into an option of a list.

    Stops consuming the iterable at the first `NONE`, which is returned.

    Args:
        options: The options to collect, in order.

    Returns:
        `Some` of every value in order, or `NONE`.

    Example:
        ```python
        >>> from pyok import NONE, Some, option
        >>> option.sequence([])
        Some(value=[])
        >>> option.sequence([Some(1), NONE, Some(2)])
        NONE

        ```
    """
    values: list[T] = []
    for opt in options:
        if opt.is_none():
            return NONE
        values.append(opt.unwrap())
    return Some(values)


def traverse[T, U](items: Iterable[T], f: Callable[[T], Option[U]]) -> Option[list[U]]:
    """
    Applies f to every item and collects the values, stopping at the first `NONE`.

    f is never called on the items after the first failure.

    Example:
        ```python
        >>> from pyok import option
        >>> option.traverse(["1", "2"], lambda s: option.from_(int, s))
        Some(value=[1, 2])
        >>> option.traverse(["1", "x", "3"], lambda s: option.from_(int, s))
        NONE

        ```
    """
    return sequence(f(item) for item in items)


@overload
def do[T](block: Callable[[], Awaitable[Option[T]]]) -> Awaitable[Option[T]]: ...
@overload
def do[T](block: Callable[[], Option[T]]) -> Option[T]: ...
def do(block: Callable[[], Any]) -> Any:
    """
    Runs a block of code that extracts `Some` values with `bind`, stopping at the first `NONE`.

    The block evaluates to its own return value, or to `NONE` as soon as a `bind` call hits one:
    nothing after that call runs. This is equivalent to chaining `and_then` calls.

    If the block is asynchronous, an awaitable is returned instead.

    Args:
        block: A function taking no argument and returning an `Option`.

    Returns:
        The option returned by block, or `NONE`.

    Raises:
        TypeError: If block does not return an `Option`.

    Example:
        ```python
        >>> from pyok import NONE, Some, option
        >>> def total() -> option.Option[int]:
        ...     a = Some(1).bind()
        ...     b = option.of({"b": 2}.get("b")).bind()
        ...     return Some(a + b)
        >>> option.do(total)
        Some(value=3)
        >>> def broken() -> option.Option[int]:
        ...     a = Some(1).bind()
        ...     b = NONE.bind()
        ...     print("never printed")
        ...     return Some(a + b)
        >>> option.do(broken)
        NONE

        ```
    """
    return run_do(block, Option)


async def do_async[T](
    block: Callable[[], Awaitable[Option[T]] | Option[T]],
) -> Option[T]:
    """
    Coroutine version of `do`, accepting both synchronous and asynchronous blocks.

    Suspends only where the block awaits. Once an awaited computation resolves, `bind` short-circuits as in `do`.

    Args:
        block: A function taking no argument and returning an `Option` or an awaitable of one.

    Returns:
        The option returned by block, or `NONE`.
    """
    return await run_do_async(block, Option)
