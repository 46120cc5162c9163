"""YAML formatter for Branchmap."""

import yaml

from ..models import ScanResult
from .base import BaseFormatter


class YamlFormatter(BaseFormatter):
    """Render the whole scan result as YAML, keeping field order."""

    def render(self, result: ScanResult) -> None:
        print(self.format(result), end="")

    def format(self, result: ScanResult) -> str:
        return yaml.safe_dump(result.to_dict(), sort_keys=False, default_flow_style=False)
