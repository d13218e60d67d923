from .text_io import read_lines, split_lines, expand_tabs_and_strip_line_endings
from .json_io import load_alignment, save_alignment, save_json
from .config_loader import load_config, build_from_config, read_options, report_options

__all__ = [
    "read_lines",
    "split_lines",
    "expand_tabs_and_strip_line_endings",
    "load_alignment",
    "save_alignment",
    "save_json",
    "load_config",
    "build_from_config",
    "read_options",
    "report_options",
]
