from ._config import Config, get_config
from ._format import func_name
from ._main import Pipeable, payload_eq

__all__ = [
    "Config",
    "Pipeable",
    "func_name",
    "get_config",
    "payload_eq",
]
