from __future__ import annotations

from collections.abc import Callable
from typing import Concatenate, Self


class Pipeable:
    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Convert `Self` to `R`.

        This method allows to pipe the container into a function that converts it into another type.

        Conceptually, this allow to do x.into(f) instead of f(x), hence keeping a functional chaining style.

        Args:
            func (Callable[Concatenate[Self, P], R]): Function for conversion.
            *args (P.args): Positional arguments to pass to the function.
            **kwargs (P.kwargs): Keyword arguments to pass to the function.

        Returns:
            R: The converted value.

        Example:
        ```python
        >>> import pyok
        >>> def describe(opt: pyok.Option[int], unit: str) -> str:
        ...     return opt.map_or("nothing", lambda v: f"{v} {unit}")
        >>> pyok.Some(3).into(describe, "apples")
        '3 apples'
        >>> pyok.NONE.into(describe, "apples")
        'nothing'

        ```
        """
        return func(self, *args, **kwargs)


def payload_eq(left: object, right: object) -> bool:
    """Compare two payloads, treating an object as equal to itself.

    Keeps `Some(nan) == Some(nan)` true for the same `nan` object, which plain `==` on floats denies.

    Example:
    ```python
    >>> import math
    >>> payload_eq(math.nan, math.nan)
    True
    >>> payload_eq(1, 1.0)
    True
    >>> payload_eq(float("nan"), float("nan"))
    False

    ```
    """
    return left is right or bool(left == right)
