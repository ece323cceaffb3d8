"""Abstract base class for display implementations."""

from abc import ABC, abstractmethod
from typing import Any


class Display(ABC):
    """Abstract base for display implementations."""

    @abstractmethod
    def status(self, message: str, **kwargs) -> None:
        """Display a status message."""

    @abstractmethod
    def success(self, message: str, **kwargs) -> None:
        """Display a success message."""

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        """Display an error message.

        Args:
            message: Error text
            kwargs: Implementation-specific options (e.g., details)
        """

    @abstractmethod
    def warning(self, message: str, **kwargs) -> None:
        """Display a warning message."""

    @abstractmethod
    def info(self, message: str, **kwargs) -> None:
        """Display an informational message."""

    @abstractmethod
    def table(self, rows: list[dict[str, Any]], headers: list[str], **kwargs) -> None:
        """Display rows in table format.

        Args:
            rows: List of rows (dicts mapping column name to value)
            headers: Column names, in display order
            kwargs: Implementation-specific options (title, etc.)
        """

    @abstractmethod
    def json_output(self, data: Any, **kwargs) -> None:
        """Display structured data as JSON or YAML."""
