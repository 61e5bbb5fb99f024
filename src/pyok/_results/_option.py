from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Concatenate, Never

from typing_extensions import TypeIs

from .._core import Pipeable, get_config, payload_eq
from ._errors import OptionUnwrapError, ShortCircuit

if TYPE_CHECKING:
    from ._result import Result


class Option[T](ABC, Pipeable):
    """A value that is either present (`Some`) or absent (`NONE`).

    Presence is decided by the variant alone: `0`, `""` or `[]` wrapped in `Some` are present values.
    """

    __slots__ = ()

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """
        Returns `True` if the option is a `Some` value.

        Returns:
            `True` if the option is a `Some` variant, `False` otherwise.

        Example:
            ```python
            >>> from pyok import Some, NONE, Option
            >>> x: Option[int] = Some(2)
            >>> x.is_some()
            True
            >>> y: Option[int] = NONE
            >>> y.is_some()
            False

            ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """
        Returns `True` if the option is a `None` value.

        Returns:
            `True` if the option is the `NoneOption` variant, `False` otherwise.

        Example:
            ```python
            >>> from pyok import Some, NONE, Option
            >>> x: Option[int] = Some(0)
            >>> x.is_none()
            False
            >>> y: Option[int] = NONE
            >>> y.is_none()
            True

            ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the contained `Some` value.

        The value is returned as stored, never copied.

        Returns:
            The contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `None`.

        Example:
            ```python
            >>> from pyok import Some, NONE
            >>> Some("car").unwrap()
            'car'
            >>> NONE.unwrap()
            Traceback (most recent call last):
                ...
            pyok._results._errors.OptionUnwrapError: called `unwrap` on a `None`

            ```
        """
        ...

    @abstractmethod
    def bind(self) -> T:
        """
        Extracts the `Some` value inside a `do` block.

        On `None`, unwinds to the enclosing `do` block, which then evaluates to `NONE`.
        Nothing written after the failing `bind` in the block runs.

        Calling it on `None` outside of a `do` block lets `ShortCircuit` escape: this is a programming error.

        Returns:
            The contained `Some` value.

        Raises:
            ShortCircuit: If the option is `None`.

        Example:
            ```python
            >>> from pyok import Some, NONE, option
            >>> option.do(lambda: Some(Some(2).bind() + Some(3).bind()))
            Some(value=5)
            >>> option.do(lambda: Some(Some(2).bind() + NONE.bind()))
            NONE

            ```
        """
        ...

    def is_some_and[**P](
        self,
        predicate: Callable[Concatenate[T, P], bool],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> bool:
        """
        Returns `True` if the option is `Some` and the value inside of it matches a predicate.

        The predicate is never called on `None`.

        Args:
            predicate: The predicate to test the `Some` value against.
            *args: Additional positional arguments to pass to predicate.
            **kwargs: Additional keyword arguments to pass to predicate.

        Returns:
            `True` if the option is `Some` and the predicate holds, `False` otherwise.

        Example:
            ```python
            >>> from pyok import Some, NONE
            >>> Some(2).is_some_and(lambda x: x > 1)
            True
            >>> Some(0).is_some_and(lambda x: x > 1)
            False
            >>> NONE.is_some_and(lambda x: x > 1)
            False

            ```
        """
        return self.is_some() and predicate(self.unwrap(), *args, **kwargs)

    def is_none_or[**P](
        self,
        predicate: Callable[Concatenate[T, P], bool],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> bool:
        """
        Returns `True` if the option is `None` or the value inside of it matches a predicate.

        Example:
            ```python
            >>> from pyok import Some, NONE
            >>> Some(2).is_none_or(lambda x: x > 1)
            True
            >>> Some(0).is_none_or(lambda x: x > 1)
            False
            >>> NONE.is_none_or(lambda x: x > 1)
            True

            ```
        """
        return self.is_none() or predicate(self.unwrap(), *args, **kwargs)

    def expect(self, msg: str) -> T:
        """
        Returns the contained `Some` value.

        Raises an exception with a provided message if the value is `None`.

        Args:
            msg: The message to include in the exception if the option is `None`.

        Returns:
            The contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `None`.

        Example:
            ```python
            >>> from pyok import Some, NONE
            >>> Some("value").expect("fruits are healthy")
            'value'
            >>> NONE.expect("fruits are healthy")
            Traceback (most recent call last):
                ...
            pyok._results._errors.OptionUnwrapError: fruits are healthy (called `expect` on a `None`)

            ```
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `None`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """
        Returns the contained `Some` value or a provided default.

        Args:
            default: The value to return if the option is `None`.

        Returns:
            The contained `Some` value or the provided default.

        Example:
            ```python
            >>> from pyok import Some, NONE
            >>> Some("car").unwrap_or("bike")
            'car'
            >>> NONE.unwrap_or("bike")
            'bike'

            ```
        """
        return self.unwrap() if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """
        Returns the contained `Some` value or computes it from a function.

        The function is only called on `None`.

        Args:
            f: A function that returns a default value if the option is `None`.

        Returns:
            The contained `Some` value or the result of the function.

        Example:
            ```python
            >>> from pyok import Some, NONE
            >>> k = 10
            >>> Some(4).unwrap_or_else(lambda: 2 * k)
            4
            >>> NONE.unwrap_or_else(lambda: 2 * k)
            20

            ```
        """
        return self.unwrap() if self.is_some() else f()

    def map[**P, U](
        self,
        f: Callable[Concatenate[T, P], U],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Option[U]:
        """
        Maps an `Option[T]` to `Option[U]` by applying a function to a contained `Some` value,
        leaving a `None` value untouched.

        Args:
            f: The function to apply to the `Some` value.
            *args: Additional positional arguments to pass to f.
            **kwargs: Additional keyword arguments to pass to f.

        Returns:
            A new `Option` with the mapped value if `Some`, otherwise `None`.

        Example:
            ```python
            >>> from pyok import Some, NONE
            >>> Some("Hello, World!").map(len)
            Some(value=13)
            >>> Some(3).map(pow, 2)
            Some(value=9)
            >>> NONE.map(len)
            NONE

            ```
        """
        if self.is_some():
            return Some(f(self.unwrap(), *args, **kwargs))
        return NONE

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:
        """
        Returns the provided default (if `None`), or applies a function to the contained value (if `Some`).

        Args:
            default: The value to return if the option is `None`.
            f: The function to apply to the `Some` value.

        Returns:
            The result of f, or the default.

        Example:
            ```python
            >>> from pyok import Some, NONE
            >>> Some("foo").map_or(42, len)
            3
            >>> NONE.map_or(42, len)
            42

            ```
        """
        return f(self.unwrap()) if self.is_some() else default

    def map_or_else[U](self, default: Callable[[], U], f: Callable[[T], U]) -> U:
        """
        Computes a default function result (if `None`), or applies a different function to the contained value (if `Some`).

        Args:
            default: The function producing the value if the option is `None`.
            f: The function to apply to the `Some` value.

        Returns:
            The result of f, or the result of default.

        Example:
            ```python
            >>> from pyok import Some, NONE
            >>> k = 21
            >>> Some("foo").map_or_else(lambda: 2 * k, len)
            3
            >>> NONE.map_or_else(lambda: 2 * k, len)
            42

            ```
        """
        return f(self.unwrap()) if self.is_some() else default()

    def ok_or[E](self, err: E) -> Result[T, E]:
        """
        Transforms the `Option[T]` into a `Result[T, E]`, mapping `Some(v)` to `Ok(v)` and `None` to `Err(err)`.

        Args:
            err: The error value to use if the option is `None`.

        Returns:
            `Ok(value)` if `Some`, otherwise `Err(err)`.

        Example:
            ```python
            >>> from pyok import Some, NONE
            >>> Some("foo").ok_or(0)
            Ok(value='foo')
            >>> NONE.ok_or(0)
            Err(error=0)

            ```
        """
        from ._result import Err, Ok

        if self.is_some():
            return Ok(self.unwrap())
        return Err(err)

    def ok_or_else[E](self, err: Callable[[], E]) -> Result[T, E]:
        """
        Transforms the `Option[T]` into a `Result[T, E]`, mapping `Some(v)` to `Ok(v)` and `None` to `Err(err())`.

        Args:
            err: A function producing the error value if the option is `None`.

        Returns:
            `Ok(value)` if `Some`, otherwise `Err(err())`.

        Example:
            ```python
            >>> from pyok import Some, NONE
            >>> Some("foo").ok_or_else(lambda: 0)
            Ok(value='foo')
            >>> NONE.ok_or_else(lambda: 0)
            Err(error=0)

            ```
        """
        from ._result import Err, Ok

        if self.is_some():
            return Ok(self.unwrap())
        return Err(err())

    def and_[U](self, optb: Option[U]) -> Option[U]:
        """
        Returns `None` if the option is `None`, otherwise returns optb.

        Named `and_` since `and` is a reserved word.

        Args:
            optb: The option to return if the original option is `Some`.

        Returns:
            optb if the original option is `Some`, otherwise `None`.

        Example:
            ```python
            >>> from pyok import Some, NONE
            >>> Some(2).and_(Some("foo"))
            Some(value='foo')
            >>> Some(2).and_(NONE)
            NONE
            >>> NONE.and_(Some("foo"))
            NONE

            ```
        """
        return optb if self.is_some() else NONE

    def or_(self, optb: Option[T]) -> Option[T]:
        """
        Returns the option if it contains a value, otherwise returns optb.

        Named `or_` since `or` is a reserved word.

        Args:
            optb: The option to return if the original option is `None`.

        Returns:
            The original option if it is `Some`, otherwise optb.

        Example:
            ```python
            >>> from pyok import Some, NONE
            >>> Some(2).or_(NONE)
            Some(value=2)
            >>> NONE.or_(Some(100))
            Some(value=100)
            >>> Some(2).or_(Some(100))
            Some(value=2)
            >>> NONE.or_(NONE)
            NONE

            ```
        """
        return self if self.is_some() else optb

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """
        Returns the option if it contains a value, otherwise calls a function and returns the result.

        Args:
            f: The function to call if the option is `None`.

        Returns:
            The original `Option` if it is `Some`, otherwise the result of the function.

        Example:
            ```python
            >>> from pyok import Some, NONE, Option
            >>> def nobody() -> Option[str]:
            ...     return NONE
            >>> def vikings() -> Option[str]:
            ...     return Some("vikings")
            >>> Some("barbarians").or_else(vikings)
            Some(value='barbarians')
            >>> NONE.or_else(vikings)
            Some(value='vikings')
            >>> NONE.or_else(nobody)
            NONE

            ```
        """
        return self if self.is_some() else f()

    def xor(self, optb: Option[T]) -> Option[T]:
        """
        Returns `Some` if exactly one of self and optb is `Some`, otherwise returns `None`.

        Example:
            ```python
            >>> from pyok import Some, NONE
            >>> Some(2).xor(NONE)
            Some(value=2)
            >>> NONE.xor(Some(2))
            Some(value=2)
            >>> Some(2).xor(Some(2))
            NONE

            ```
        """
        if self.is_some() and optb.is_none():
            return self
        if self.is_none() and optb.is_some():
            return optb
        return NONE

    def and_then[**P, U](
        self,
        f: Callable[Concatenate[T, P], Option[U]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Option[U]:
        """
        Calls a function if the option is `Some`, otherwise returns `None`.

        Some languages call this operation flatmap, see `flat_map`.

        Args:
            f: The function to call with the `Some` value.
            *args: Additional positional arguments to pass to f.
            **kwargs: Additional keyword arguments to pass to f.

        Returns:
            The result of the function if `Some`, otherwise `None`.

        Example:
            ```python
            >>> from pyok import Some, NONE, Option
            >>> def sq(x: int) -> Option[int]:
            ...     return Some(x * x)
            >>> def nope(x: int) -> Option[int]:
            ...     return NONE
            >>> Some(2).and_then(sq).and_then(sq)
            Some(value=16)
            >>> Some(2).and_then(sq).and_then(nope)
            NONE
            >>> Some(2).and_then(nope).and_then(sq)
            NONE
            >>> NONE.and_then(sq).and_then(sq)
            NONE

            ```
        """
        if self.is_some():
            return f(self.unwrap(), *args, **kwargs)
        return NONE

    def flat_map[**P, U](
        self,
        f: Callable[Concatenate[T, P], Option[U]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Option[U]:
        """Alias of `and_then`."""
        return self.and_then(f, *args, **kwargs)

    def filter[**P](
        self,
        predicate: Callable[Concatenate[T, P], bool],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Option[T]:
        """
        Returns `None` if the option is `None`, otherwise calls predicate with the wrapped value and returns:

        - `Some(value)` if the predicate returns `True`.
        - `None` if the predicate returns `False`.

        Args:
            predicate: The predicate to test the `Some` value against.
            *args: Additional positional arguments to pass to predicate.
            **kwargs: Additional keyword arguments to pass to predicate.

        Returns:
            The original option if the predicate holds, otherwise `None`.

        Example:
            ```python
            >>> from pyok import Some, NONE
            >>> def is_even(n: int) -> bool:
            ...     return n % 2 == 0
            >>> NONE.filter(is_even)
            NONE
            >>> Some(3).filter(is_even)
            NONE
            >>> Some(4).filter(is_even)
            Some(value=4)

            ```
        """
        if self.is_some() and predicate(self.unwrap(), *args, **kwargs):
            return self
        return NONE

    def tap[**P, R](
        self,
        f: Callable[Concatenate[T, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R | None:
        """
        Calls a function with the `Some` value for its side effect and returns what the function returns.

        Does nothing and returns `None` on `None`. The option itself is never changed.

        Args:
            f: The function to call with the `Some` value.
            *args: Additional positional arguments to pass to f.
            **kwargs: Additional keyword arguments to pass to f.

        Returns:
            The return value of f, or `None`.

        Example:
            ```python
            >>> from pyok import Some, NONE
            >>> seen: list[int] = []
            >>> Some(3).tap(seen.append)
            >>> NONE.tap(seen.append)
            >>> seen
            [3]

            ```
        """
        if self.is_some():
            return f(self.unwrap(), *args, **kwargs)
        return None

    def inspect[**P](
        self,
        f: Callable[Concatenate[T, P], object],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Option[T]:
        """
        Calls a function with the `Some` value for its side effect, then returns the option unchanged.

        Example:
            ```python
            >>> from pyok import Some
            >>> Some(4).inspect(print).map(lambda x: x + 1)
            4
            Some(value=5)

            ```
        """
        if self.is_some():
            f(self.unwrap(), *args, **kwargs)
        return self

    def zip[U](self, other: Option[U]) -> Option[tuple[T, U]]:
        """
        Zips self with another `Option`.

        Returns `Some((a, b))` if both are `Some`, otherwise `None`.

        Example:
            ```python
            >>> from pyok import Some, NONE
            >>> Some(1).zip(Some("hi"))
            Some(value=(1, 'hi'))
            >>> Some(1).zip(NONE)
            NONE

            ```
        """
        if self.is_some() and other.is_some():
            return Some((self.unwrap(), other.unwrap()))
        return NONE

    def flatten[U](self: Option[Option[U]]) -> Option[U]:
        """
        Removes one level of nesting from an `Option[Option[U]]`.

        Example:
            ```python
            >>> from pyok import Some, NONE
            >>> Some(Some(6)).flatten()
            Some(value=6)
            >>> Some(NONE).flatten()
            NONE
            >>> NONE.flatten()
            NONE

            ```
        """
        return self.unwrap() if self.is_some() else NONE

    def match[R](self, *, some: Callable[[T], R], none: Callable[[], R]) -> R:
        """
        Exhaustive dispatch on the variant: calls `some(value)` or `none()` and returns its result.

        Args:
            some: The function called with the `Some` value.
            none: The function called if the option is `None`.

        Returns:
            The result of the called function.

        Example:
            ```python
            >>> from pyok import Some, NONE
            >>> Some(2).match(some=lambda v: f"got {v}", none=lambda: "nothing")
            'got 2'
            >>> NONE.match(some=lambda v: f"got {v}", none=lambda: "nothing")
            'nothing'

            ```
        """
        return some(self.unwrap()) if self.is_some() else none()


@dataclass(slots=True, frozen=True, repr=False, eq=False)
class Some[T](Option[T]):
    """Option variant representing the presence of a value.

    Args:
        value (T): The contained value.

    Example:
    ```python
    >>> import pyok
    >>> pyok.Some(42)
    Some(value=42)
    >>> match pyok.Some(""):
    ...     case pyok.Some(v):
    ...         print(repr(v))
    ''

    ```
    """

    value: T

    def __repr__(self) -> str:
        return f"Some(value={get_config().value_repr(self.value)})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return payload_eq(self.value, other.value)  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.value))

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value

    def bind(self) -> T:
        return self.value


@dataclass(slots=True, frozen=True, repr=False)
class NoneOption(Option[Any]):
    """Option variant representing the absence of a value.

    Carries no payload: use the `NONE` singleton.
    """

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("called `unwrap` on a `None`")

    def bind(self) -> Never:
        raise ShortCircuit(self)


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""


def some[T](value: T) -> Option[T]:
    """Wraps a value in `Some`, typed as `Option[T]`."""
    return Some(value)
