"""Exception hierarchy for pyok."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ._option import Option
    from ._result import Result


class UnwrapError(RuntimeError):
    """Base exception for a failed `unwrap`/`expect` family call.

    Raised when the caller asserted a variant that the container does not hold.
    """


class OptionUnwrapError(UnwrapError):
    """`unwrap` or `expect` was called on `NONE`."""


class ResultUnwrapError(UnwrapError):
    """An `unwrap`-family method was called on the wrong `Result` variant.

    The payload of the offending container is kept on `payload`: the error for `unwrap`/`expect`,
    the value for `unwrap_err`/`expect_err`.
    """

    def __init__(self, message: str, *, payload: Any = None) -> None:
        super().__init__(message)
        self.payload = payload


class ShortCircuit(BaseException):
    """Unwind raised by `bind` on `NONE` or `Err`, caught by the enclosing `do` block.

    Derives from `BaseException` so that `except Exception` handlers inside a block cannot swallow it.
    Escaping a `do` block means `bind` was called outside of one.
    """

    def __init__(self, residual: Option[Any] | Result[Any, Any]) -> None:
        super().__init__(residual)
        self.residual = residual
