"""Top-level mdlinks configuration."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...utils.get_home_dir import get_home_dir
from .CheckConfig import CheckConfig
from .LogConfig import LogConfig
from .ScanConfig import ScanConfig


class LinksConfig(BaseModel):
    """Top-level configuration for mdlinks."""

    model_config = ConfigDict(extra="forbid")

    check: CheckConfig = Field(default_factory=CheckConfig)
    scan: ScanConfig = Field(default_factory=ScanConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on MDLINKS_HOME or default to ~/.mdlinks."""
        return get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "LinksConfig":
        """Load and validate config from file.

        Every section is optional; a missing file yields the defaults.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration validation error: {path} must contain a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert LinksConfig instance to a dictionary for serialization."""
        return {
            "check": self.check.model_dump(),
            "scan": self.scan.model_dump(),
            "log": self.log.model_dump(),
        }
