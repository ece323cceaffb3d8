import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .get_home_dir import get_home_dir

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(home: Path | None = None, level: str = "INFO") -> None:
    """Configure unified mdlinks logging.

    Args:
        home: Path to mdlinks home directory. If None, derived from environment.
        level: Level name for the ``mdlinks`` logger.
    """
    global _CONFIGURED
    if _CONFIGURED:
        set_log_level(level)
        return

    if home is None:
        home = get_home_dir()

    # Ensure directory exists
    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "mdlinks.log"

    root_logger = logging.getLogger("mdlinks")
    root_logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    # urllib3 logs every connection at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    _CONFIGURED = True


def set_log_level(level: str) -> None:
    """Change the level of the ``mdlinks`` logger."""
    logging.getLogger("mdlinks").setLevel(level)
