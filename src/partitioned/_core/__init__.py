from ._config import Config, get_config, set_config
from ._main import MISSING, Pipeable, convert_data

__all__ = [
    "MISSING",
    "Config",
    "Pipeable",
    "convert_data",
    "get_config",
    "set_config",
]
