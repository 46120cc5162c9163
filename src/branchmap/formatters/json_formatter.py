"""JSON formatter for Branchmap."""

import json

from ..models import ScanResult
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the whole scan result as JSON."""

    def render(self, result: ScanResult) -> None:
        print(self.format(result))

    def format(self, result: ScanResult) -> str:
        return json.dumps(result.to_dict(), indent=2)
