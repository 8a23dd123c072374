"""Config loading and schema."""

from .loader import ConfigLoadError, load_config
from .schema import CageSettings

__all__ = ["CageSettings", "ConfigLoadError", "load_config"]
