from __future__ import annotations
from pathlib import Path
from typing import List
from diffy.core.text_line import TextLines

DEFAULT_TAB_SIZE = 4


def expand_tabs_and_strip_line_endings(s: str, tab_size: int = DEFAULT_TAB_SIZE) -> str:
    """
    Replace each tab with spaces up to the next multiple of tab_size (counted in
    characters already produced) and drop every carriage return and newline.
    """
    if tab_size < 1:
        raise ValueError(f"tab_size must be at least 1, got {tab_size}")
    out: List[str] = []
    width = 0
    for ch in s:
        if ch == "\t":
            pad = tab_size - width % tab_size
            out.append(" " * pad)
            width += pad
        elif ch in "\r\n":
            continue
        else:
            out.append(ch)
            width += 1
    return "".join(out)


def split_lines(text: str, tab_size: int = DEFAULT_TAB_SIZE) -> TextLines:
    parts = text.split("\n")
    # a trailing newline (or empty text) does not start another line
    if parts and parts[-1] == "":
        parts.pop()
    return TextLines(expand_tabs_and_strip_line_endings(p, tab_size) for p in parts)


def read_lines(path: str | Path, tab_size: int = DEFAULT_TAB_SIZE, encoding: str = "utf-8") -> TextLines:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"The path {str(p)!r} does not exist.")
    if p.is_dir():
        raise IsADirectoryError(f"The path {str(p)!r} points to a directory, not a file.")
    with p.open("r", encoding=encoding, newline="") as f:
        text = f.read()
    return split_lines(text, tab_size)
