from reprlib import Repr
from typing import Any


def value_repr(
    v: Any,
    max_string: int = 60,
    max_items: int = 10,
    depth: int = 3,
    max_other: int = 80,
) -> str:
    limits = Repr(
        maxlevel=depth,
        maxstring=max_string,
        maxother=max_other,
        maxlong=max_other,
        maxlist=max_items,
        maxtuple=max_items,
        maxset=max_items,
        maxfrozenset=max_items,
        maxdict=max_items,
        maxdeque=max_items,
        maxarray=max_items,
    )
    return limits.repr(v)


def func_name(fn: Any) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)
