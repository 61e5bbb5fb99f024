"""Early-exit evaluation of blocks that `bind` into containers.

`bind` on a failed container raises `ShortCircuit`; the runners below catch it and hand the
failed container back as the value of the whole block. A runner only owns unwinds of its own
kind: an `Option` runner re-raises a `Result` unwind so that the enclosing `Result` runner gets it.
An unwind that reaches the runner wrapped in an exception group, as `asyncio.TaskGroup` does with
failing child tasks, is unwrapped the same way when every failure in the group is an unwind.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from ._errors import ShortCircuit
from ._option import Option
from ._result import Result

log = logging.getLogger(__name__)

type Container = Option[Any] | Result[Any, Any]
type Kind = type[Option[Any]] | type[Result[Any, Any]] | tuple[type[Any], ...]

ANY_KIND: tuple[type[Any], ...] = (Option, Result)


def _kind_name(kind: Kind) -> str:
    if isinstance(kind, tuple):
        return " | ".join(k.__name__ for k in kind)
    return kind.__name__


def _residual(exc: ShortCircuit, kind: Kind) -> Container:
    if not isinstance(exc.residual, kind):
        log.debug(
            "re-raising %r: not owned by a %s block", exc.residual, _kind_name(kind)
        )
        raise exc
    log.debug("do block short-circuited on %r", exc.residual)
    return exc.residual


def _group_residual(group: BaseExceptionGroup[Any], kind: Kind) -> Container:
    """Unwrap a short-circuit that a task group wrapped, keeping any other failure."""
    unwinds, rest = group.split(ShortCircuit)
    if unwinds is None:
        raise group
    if rest is not None:
        raise rest
    first = _first_leaf(unwinds)
    if not isinstance(first.residual, kind):
        log.debug(
            "re-raising %r: not owned by a %s block", first.residual, _kind_name(kind)
        )
        raise group
    return _residual(first, kind)


def _first_leaf(group: BaseExceptionGroup[ShortCircuit]) -> ShortCircuit:
    exc = group.exceptions[0]
    return _first_leaf(exc) if isinstance(exc, BaseExceptionGroup) else exc


def _checked(out: object, kind: Kind) -> Any:
    if not isinstance(out, kind):
        msg = f"do block must return {_kind_name(kind)}, got {type(out).__name__}"
        raise TypeError(msg)
    return out


async def run_do_async(
    block: Callable[[], Awaitable[Any] | Any], kind: Kind = ANY_KIND
) -> Any:
    """Run block, awaiting it if it is asynchronous, and turn a short-circuit into its residual."""
    try:
        out = block()
        if inspect.isawaitable(out):
            out = await out
    except ShortCircuit as exc:
        return _residual(exc, kind)
    except BaseExceptionGroup as group:
        return _group_residual(group, kind)
    return _checked(out, kind)


async def _resolve(pending: Awaitable[Any], kind: Kind) -> Any:
    try:
        out = await pending
    except ShortCircuit as exc:
        return _residual(exc, kind)
    except BaseExceptionGroup as group:
        return _group_residual(group, kind)
    return _checked(out, kind)


def run_do(block: Callable[[], Any], kind: Kind = ANY_KIND) -> Any:
    """Run block and turn a short-circuit into its residual.

    If block returns an awaitable, a coroutine is returned instead, applying the same rule once awaited.
    """
    try:
        out = block()
    except ShortCircuit as exc:
        return _residual(exc, kind)
    except BaseExceptionGroup as group:
        return _group_residual(group, kind)
    if inspect.isawaitable(out):
        return _resolve(out, kind)
    return _checked(out, kind)
