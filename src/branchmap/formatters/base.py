"""Base formatter interface for Branchmap output rendering."""

from abc import ABC, abstractmethod

from ..models import ScanResult


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, result: ScanResult) -> None:
        """Write the formatted result to the terminal."""

    @abstractmethod
    def format(self, result: ScanResult) -> str:
        """Return formatted string representation of the result."""
