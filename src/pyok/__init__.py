"""Option and Result containers, with early-exit do blocks.

Example:
```python
>>> import pyok
>>> def halve(n: int) -> pyok.Option[int]:
...     return pyok.Some(n // 2) if n % 2 == 0 else pyok.NONE
>>> pyok.Some(8).and_then(halve).and_then(halve)
Some(value=2)
>>> pyok.do(lambda: pyok.Some(halve(6).bind() + halve(3).bind()))
NONE

```
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any, overload

from . import option, result
from ._core import Config, get_config
from ._results import (
    NONE,
    Err,
    NoneOption,
    Ok,
    Option,
    OptionUnwrapError,
    Result,
    ResultUnwrapError,
    ShortCircuit,
    Some,
    UnwrapError,
    err,
    ok,
    run_do,
    run_do_async,
    some,
)

logging.getLogger("pyok").addHandler(logging.NullHandler())

none: Option[Any] = NONE
"""Lowercase alias of `NONE`."""


@overload
def do[T](block: Callable[[], Awaitable[Option[T]]]) -> Awaitable[Option[T]]: ...
@overload
def do[T, E](
    block: Callable[[], Awaitable[Result[T, E]]],
) -> Awaitable[Result[T, E]]: ...
@overload
def do[T](block: Callable[[], Option[T]]) -> Option[T]: ...
@overload
def do[T, E](block: Callable[[], Result[T, E]]) -> Result[T, E]: ...
def do(block: Callable[[], Any]) -> Any:
    """Runs a do block binding into either kind of container.

    See `option.do` and `result.do`, which only catch failures of their own kind.
    """
    return run_do(block)


async def do_async(block: Callable[[], Any]) -> Any:
    """Coroutine version of `do`, see `option.do_async` and `result.do_async`."""
    return await run_do_async(block)


__all__ = [
    "NONE",
    "Config",
    "Err",
    "NoneOption",
    "Ok",
    "Option",
    "OptionUnwrapError",
    "Result",
    "ResultUnwrapError",
    "ShortCircuit",
    "Some",
    "UnwrapError",
    "do",
    "do_async",
    "err",
    "get_config",
    "none",
    "ok",
    "option",
    "result",
    "some",
]
