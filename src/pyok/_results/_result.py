from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Concatenate, Never, cast

from typing_extensions import TypeIs

from .._core import Pipeable, get_config, payload_eq
from ._errors import ResultUnwrapError, ShortCircuit
from ._option import NONE, Option, Some


class Result[T, E](ABC, Pipeable):
    """The outcome of a computation: a success value (`Ok`) or an error value (`Err`)."""

    __slots__ = ()

    @abstractmethod
    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        """
        Returns `True` if the result is `Ok`.

        Example:
            ```python
            >>> from pyok import Ok, Err
            >>> Ok(-3).is_ok()
            True
            >>> Err("some error").is_ok()
            False

            ```
        """
        ...

    @abstractmethod
    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        """
        Returns `True` if the result is `Err`.

        Example:
            ```python
            >>> from pyok import Ok, Err
            >>> Ok(-3).is_err()
            False
            >>> Err("some error").is_err()
            True

            ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the contained `Ok` value, as stored.

        Raises:
            ResultUnwrapError: If the result is `Err`, carrying the error as `payload`.

        Example:
            ```python
            >>> from pyok import Ok, Err
            >>> Ok(2).unwrap()
            2
            >>> Err("emergency failure").unwrap()
            Traceback (most recent call last):
                ...
            pyok._results._errors.ResultUnwrapError: called `unwrap` on Err: 'emergency failure'

            ```
        """
        ...

    @abstractmethod
    def unwrap_err(self) -> E:
        """
        Returns the contained `Err` value.

        Raises:
            ResultUnwrapError: If the result is `Ok`, carrying the value as `payload`.

        Example:
            ```python
            >>> from pyok import Err
            >>> Err("emergency failure").unwrap_err()
            'emergency failure'

            ```
        """
        ...

    @abstractmethod
    def bind(self) -> T:
        """
        Extracts the `Ok` value inside a `do` block.

        On `Err`, unwinds to the enclosing `do` block, which then evaluates to this very `Err`.
        Nothing written after the failing `bind` in the block runs.

        Calling it on `Err` outside of a `do` block lets `ShortCircuit` escape: this is a programming error.

        Raises:
            ShortCircuit: If the result is `Err`.

        Example:
            ```python
            >>> from pyok import Ok, Err, result
            >>> result.do(lambda: Ok(Ok(2).bind() * 10))
            Ok(value=20)
            >>> result.do(lambda: Ok(Err("no").bind() * 10))
            Err(error='no')

            ```
        """
        ...

    def is_ok_and[**P](
        self,
        predicate: Callable[Concatenate[T, P], bool],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> bool:
        """
        Returns `True` if the result is `Ok` and the value inside of it matches a predicate.

        The predicate is never called on `Err`.

        Example:
            ```python
            >>> from pyok import Ok, Err
            >>> Ok(2).is_ok_and(lambda x: x > 1)
            True
            >>> Ok(0).is_ok_and(lambda x: x > 1)
            False
            >>> Err("hey").is_ok_and(lambda x: x > 1)
            False

            ```
        """
        return self.is_ok() and predicate(self.unwrap(), *args, **kwargs)

    def is_err_and[**P](
        self,
        predicate: Callable[Concatenate[E, P], bool],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> bool:
        """
        Returns `True` if the result is `Err` and the error inside of it matches a predicate.

        The predicate is never called on `Ok`.

        Example:
            ```python
            >>> from pyok import Ok, Err
            >>> Err(KeyError("a")).is_err_and(lambda e: isinstance(e, KeyError))
            True
            >>> Err(ValueError()).is_err_and(lambda e: isinstance(e, KeyError))
            False
            >>> Ok(123).is_err_and(lambda e: isinstance(e, KeyError))
            False

            ```
        """
        return self.is_err() and predicate(self.unwrap_err(), *args, **kwargs)

    def ok(self) -> Option[T]:
        """
        Converts the `Result` into an `Option`, mapping `Ok(v)` to `Some(v)` and `Err(e)` to `NONE`.

        Example:
            ```python
            >>> from pyok import Ok, Err
            >>> Ok(2).ok()
            Some(value=2)
            >>> Err("Nothing here").ok()
            NONE

            ```
        """
        if self.is_ok():
            return Some(self.unwrap())
        return NONE

    def err(self) -> Option[E]:
        """
        Converts the `Result` into an `Option`, mapping `Err(e)` to `Some(e)` and `Ok(v)` to `NONE`.

        Example:
            ```python
            >>> from pyok import Ok, Err
            >>> Ok(2).err()
            NONE
            >>> Err("Nothing here").err()
            Some(value='Nothing here')

            ```
        """
        if self.is_err():
            return Some(self.unwrap_err())
        return NONE

    def expect(self, msg: str) -> T:
        """
        Returns the contained `Ok` value, or raises with a custom message if the result is `Err`.

        Args:
            msg: The message to display if the result is `Err`.

        Returns:
            The contained `Ok` value.

        Raises:
            ResultUnwrapError: If the result is `Err`, with the provided message and error.

        Example:
            ```python
            >>> from pyok import Ok, Err
            >>> Ok(2).expect("Testing expect")
            2
            >>> Err("emergency failure").expect("Testing expect")
            Traceback (most recent call last):
                ...
            pyok._results._errors.ResultUnwrapError: Testing expect: emergency failure

            ```
        """
        if self.is_ok():
            return self.unwrap()
        error = self.unwrap_err()
        exc = ResultUnwrapError(f"{msg}: {error}", payload=error)
        if isinstance(error, BaseException):
            raise exc from error
        raise exc

    def expect_err(self, msg: str) -> E:
        """
        Returns the contained `Err` value, or raises with a custom message if the result is `Ok`.

        Args:
            msg: The message to display if the result is `Ok`.

        Returns:
            The contained `Err` value.

        Raises:
            ResultUnwrapError: If the result is `Ok`, with the provided message and value.

        Example:
            ```python
            >>> from pyok import Ok, Err
            >>> Err("failure").expect_err("Testing expect_err")
            'failure'
            >>> Ok(10).expect_err("Testing expect_err")
            Traceback (most recent call last):
                ...
            pyok._results._errors.ResultUnwrapError: Testing expect_err: expected Err, got Ok(10)

            ```
        """
        if self.is_err():
            return self.unwrap_err()
        value = self.unwrap()
        raise ResultUnwrapError(
            f"{msg}: expected Err, got Ok({value!r})", payload=value
        )

    def unwrap_or(self, default: T) -> T:
        """
        Returns the contained `Ok` value or a provided default.

        Example:
            ```python
            >>> from pyok import Ok, Err
            >>> Ok(9).unwrap_or(2)
            9
            >>> Err("error").unwrap_or(2)
            2

            ```
        """
        return self.unwrap() if self.is_ok() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """
        Returns the contained `Ok` value or computes it from a function.

        The function takes no argument, and is only called on `Err`.

        Example:
            ```python
            >>> from pyok import Ok, Err
            >>> Ok(2).unwrap_or_else(lambda: 0)
            2
            >>> Err("foo").unwrap_or_else(lambda: 0)
            0

            ```
        """
        return self.unwrap() if self.is_ok() else f()

    def map[**P, U](
        self,
        f: Callable[Concatenate[T, P], U],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Result[U, E]:
        """
        Maps a `Result[T, E]` to `Result[U, E]` by applying a function to a contained `Ok` value, leaving `Err` untouched.

        Args:
            f: Callable to apply to the `Ok` value.
            *args: Additional positional arguments to pass to f.
            **kwargs: Additional keyword arguments to pass to f.

        Returns:
            `Ok(f(value))` if `Ok`, otherwise the `Err` unchanged.

        Example:
            ```python
            >>> from pyok import Ok, Err
            >>> Ok(2).map(lambda x: x * 2)
            Ok(value=4)
            >>> Err("error").map(lambda x: x * 2)
            Err(error='error')

            ```
        """
        if self.is_ok():
            return Ok(f(self.unwrap(), *args, **kwargs))
        return cast(Result[U, E], self)

    def map_err[**P, F](
        self,
        f: Callable[Concatenate[E, P], F],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Result[T, F]:
        """
        Maps a `Result[T, E]` to `Result[T, F]` by applying a function to a contained `Err` value, leaving `Ok` untouched.

        Args:
            f: Callable to apply to the `Err` value.
            *args: Additional positional arguments to pass to f.
            **kwargs: Additional keyword arguments to pass to f.

        Returns:
            `Err(f(error))` if `Err`, otherwise the `Ok` unchanged.

        Example:
            ```python
            >>> from pyok import Ok, Err
            >>> Ok(2).map_err(len)
            Ok(value=2)
            >>> Err("foo").map_err(len)
            Err(error=3)

            ```
        """
        if self.is_err():
            return Err(f(self.unwrap_err(), *args, **kwargs))
        return cast(Result[T, F], self)

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:
        """
        Applies a function to the contained `Ok` value, or returns the provided default on `Err`.

        Example:
            ```python
            >>> from pyok import Ok, Err
            >>> Ok("foo").map_or(42, len)
            3
            >>> Err("bar").map_or(42, len)
            42

            ```
        """
        return f(self.unwrap()) if self.is_ok() else default

    def map_or_else[U](self, default: Callable[[], U], f: Callable[[T], U]) -> U:
        """
        Applies a function to the contained `Ok` value, or returns the result of default on `Err`.

        The result of default is returned as is: f is never applied to it.

        Args:
            default: Callable producing the value if `Err`.
            f: Callable to apply to the `Ok` value.

        Returns:
            The result of the called function.

        Example:
            ```python
            >>> from pyok import Ok, Err
            >>> k = 21
            >>> Ok("foo").map_or_else(lambda: 2 * k, len)
            3
            >>> Err("bar").map_or_else(lambda: 2 * k, len)
            42

            ```
        """
        return f(self.unwrap()) if self.is_ok() else default()

    def and_[U](self, res: Result[U, E]) -> Result[U, E]:
        """
        Returns res if the result is `Ok`, otherwise returns the `Err` value of self.

        Named `and_` since `and` is a reserved word.

        Example:
            ```python
            >>> from pyok import Ok, Err
            >>> Ok(2).and_(Err("late error"))
            Err(error='late error')
            >>> Err("early error").and_(Ok("foo"))
            Err(error='early error')
            >>> Ok(2).and_(Ok("different result type"))
            Ok(value='different result type')

            ```
        """
        if self.is_ok():
            return res
        return cast(Result[U, E], self)

    def or_[F](self, res: Result[T, F]) -> Result[T, F]:
        """
        Returns res if the result is `Err`, otherwise returns the `Ok` value of self.

        The error of self is discarded, so res may carry another error type.
        Named `or_` since `or` is a reserved word.

        Example:
            ```python
            >>> from pyok import Ok, Err
            >>> Ok(2).or_(Err("late error"))
            Ok(value=2)
            >>> Err("early error").or_(Ok(2))
            Ok(value=2)
            >>> Err("not a 2").or_(Err(404))
            Err(error=404)

            ```
        """
        if self.is_ok():
            return cast(Result[T, F], self)
        return res

    def or_else[F](self, f: Callable[[], Result[T, F]]) -> Result[T, F]:
        """
        Returns self if `Ok`, otherwise calls f and returns its result.

        The function takes no argument. The error of self is discarded, so f may return another error type.

        Example:
            ```python
            >>> from pyok import Ok, Err
            >>> Ok(2).or_else(lambda: Ok(0))
            Ok(value=2)
            >>> Err("error").or_else(lambda: Ok(0))
            Ok(value=0)
            >>> Err("error").or_else(lambda: Err(500))
            Err(error=500)

            ```
        """
        if self.is_ok():
            return cast(Result[T, F], self)
        return f()

    def and_then[**P, U](
        self,
        f: Callable[Concatenate[T, P], Result[U, E]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Result[U, E]:
        """
        Calls f if the result is `Ok`, otherwise returns the `Err` unchanged.

        This is how computations that may themselves fail are chained, see also `flat_map`.

        Args:
            f: Callable that takes the `Ok` value and returns a `Result`.
            *args: Additional positional arguments to pass to f.
            **kwargs: Additional keyword arguments to pass to f.

        Returns:
            The result of f(value) if `Ok`, otherwise the `Err`.

        Example:
            ```python
            >>> from pyok import Ok, Err, Result
            >>> def to_int(s: str) -> Result[int, str]:
            ...     return Ok(int(s)) if s.isdigit() else Err(f"not a number: {s}")
            >>> Ok("12").and_then(to_int)
            Ok(value=12)
            >>> Ok("twelve").and_then(to_int)
            Err(error='not a number: twelve')
            >>> Err("missing").and_then(to_int)
            Err(error='missing')

            ```
        """
        if self.is_ok():
            return f(self.unwrap(), *args, **kwargs)
        return cast(Result[U, E], self)

    def flat_map[**P, U](
        self,
        f: Callable[Concatenate[T, P], Result[U, E]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Result[U, E]:
        """Alias of `and_then`."""
        return self.and_then(f, *args, **kwargs)

    def tap[**P, R](
        self,
        f: Callable[Concatenate[T, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R | None:
        """
        Calls a function with the `Ok` value for its side effect and returns what the function returns.

        Does nothing and returns `None` on `Err`. The result itself is never changed.

        Example:
            ```python
            >>> from pyok import Ok, Err
            >>> seen: list[int] = []
            >>> Ok(3).tap(seen.append)
            >>> Err(4).tap(seen.append)
            >>> seen
            [3]

            ```
        """
        if self.is_ok():
            return f(self.unwrap(), *args, **kwargs)
        return None

    def inspect[**P](
        self,
        f: Callable[Concatenate[T, P], object],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Result[T, E]:
        """
        Calls a function with the `Ok` value for its side effect, then returns the result unchanged.

        Example:
            ```python
            >>> from pyok import Ok
            >>> Ok(4).inspect(print).map(lambda x: x * 2)
            4
            Ok(value=8)

            ```
        """
        if self.is_ok():
            f(self.unwrap(), *args, **kwargs)
        return self

    def inspect_err[**P](
        self,
        f: Callable[Concatenate[E, P], object],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Result[T, E]:
        """
        Calls a function with the `Err` value for its side effect, then returns the result unchanged.

        Example:
            ```python
            >>> from pyok import Err
            >>> Err("oops").inspect_err(print).map(lambda x: x * 2)
            oops
            Err(error='oops')

            ```
        """
        if self.is_err():
            f(self.unwrap_err(), *args, **kwargs)
        return self

    def flatten[U](self: Result[Result[U, E], E]) -> Result[U, E]:
        """
        Removes one level of nesting from a `Result[Result[U, E], E]`.

        Example:
            ```python
            >>> from pyok import Ok, Err
            >>> Ok(Ok("hello")).flatten()
            Ok(value='hello')
            >>> Ok(Err(6)).flatten()
            Err(error=6)
            >>> Err(6).flatten()
            Err(error=6)

            ```
        """
        if self.is_ok():
            return self.unwrap()
        return cast(Result[U, E], self)

    def match[R](self, *, ok: Callable[[T], R], err: Callable[[E], R]) -> R:
        """
        Exhaustive dispatch on the variant: calls `ok(value)` or `err(error)` and returns its result.

        Args:
            ok: Callable to handle the `Ok` value.
            err: Callable to handle the `Err` value.

        Returns:
            The result of the called function.

        Example:
            ```python
            >>> from pyok import Ok, Err
            >>> Ok(3).match(ok=lambda v: v + 1, err=len)
            4
            >>> Err("abc").match(ok=lambda v: v + 1, err=len)
            3

            ```
        """
        if self.is_ok():
            return ok(self.unwrap())
        return err(self.unwrap_err())


@dataclass(slots=True, frozen=True, repr=False, eq=False)
class Ok[T, E](Result[T, E]):
    """Represents a successful value.

    Example:
    ```python
    >>> import pyok
    >>> pyok.Ok(0)
    Ok(value=0)

    ```
    """

    value: T

    def __repr__(self) -> str:
        return f"Ok(value={get_config().value_repr(self.value)})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return payload_eq(self.value, other.value)  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.value))

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return True

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> Never:
        raise ResultUnwrapError(
            f"called `unwrap_err` on Ok: {self.value!r}", payload=self.value
        )

    def bind(self) -> T:
        return self.value


@dataclass(slots=True, frozen=True, repr=False, eq=False)
class Err[T, E](Result[T, E]):
    """Represents an error value.

    Example:
    ```python
    >>> import pyok
    >>> pyok.Err("boom")
    Err(error='boom')

    ```
    """

    error: E

    def __repr__(self) -> str:
        return f"Err(error={get_config().value_repr(self.error)})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return payload_eq(self.error, other.error)  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.error))

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return False

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        exc = ResultUnwrapError(
            f"called `unwrap` on Err: {self.error!r}", payload=self.error
        )
        if isinstance(self.error, BaseException):
            raise exc from self.error
        raise exc

    def unwrap_err(self) -> E:
        return self.error

    def bind(self) -> Never:
        raise ShortCircuit(self)


def ok[T](value: T) -> Result[T, Any]:
    """Wraps a value in `Ok`, typed as `Result[T, Any]`."""
    return Ok(value)


def err[E](error: E) -> Result[Any, E]:
    """Wraps an error in `Err`, typed as `Result[Any, E]`."""
    return Err(error)
