"""Services module - Business logic layer"""

from .alignment_renderer import AlignmentRenderer
from .config_manager import ConfigManager
from .diff_generator import DiffGenerator, diff
from .line_differ import LineDiffer, split_lines

__all__ = [
    "AlignmentRenderer",
    "ConfigManager",
    "DiffGenerator",
    "LineDiffer",
    "diff",
    "split_lines",
]
