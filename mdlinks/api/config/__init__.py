"""Config API module."""

from .CheckConfig import CheckConfig
from .LinksConfig import LinksConfig
from .LogConfig import LogConfig
from .ScanConfig import ScanConfig

__all__ = ["CheckConfig", "LinksConfig", "LogConfig", "ScanConfig"]
