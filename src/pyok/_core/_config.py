from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

from ._format import value_repr


@dataclass(slots=True)
class Config:
    """Process-wide display settings.

    Only affects how container payloads are rendered by `repr`, never how containers behave.

    Example:
    ```python
    >>> import pyok
    >>> cfg = pyok.get_config()
    >>> cfg.max_items = 3
    >>> pyok.Some(list(range(10)))
    Some(value=[0, 1, 2, ...])
    >>> cfg.reset()
    >>> pyok.Some(list(range(4)))
    Some(value=[0, 1, 2, 3])

    ```
    """

    max_string: int = 60
    """Maximum length of a rendered string payload."""
    max_items: int = 10
    """Maximum number of items rendered for collection payloads."""
    max_depth: int = 3
    """Maximum nesting level rendered for collection payloads."""
    max_other: int = 80
    """Maximum length of any other rendered payload."""

    def value_repr(self, v: Any) -> str:
        return value_repr(
            v,
            max_string=self.max_string,
            max_items=self.max_items,
            depth=self.max_depth,
            max_other=self.max_other,
        )

    def reset(self) -> None:
        """Restore every setting to its default."""
        for f in fields(self):
            setattr(self, f.name, f.default)


_CONFIG = Config()


def get_config() -> Config:
    return _CONFIG
