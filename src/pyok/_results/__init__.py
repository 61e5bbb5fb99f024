from ._do import run_do, run_do_async
from ._errors import (
    OptionUnwrapError,
    ResultUnwrapError,
    ShortCircuit,
    UnwrapError,
)
from ._option import NONE, NoneOption, Option, Some, some
from ._result import Err, Ok, Result, err, ok

__all__ = [
    "NONE",
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
    "err",
    "ok",
    "run_do",
    "run_do_async",
    "some",
]
