from __future__ import annotations
from typing import Any, Dict, Optional, Tuple
import codecs
import json
from pathlib import Path

from diffy.core.comparable import Sequence
from diffy.core.differ import DEFAULT_REALIGN_THRESHOLD, Differ, DiffRequest
from diffy.core.engine import Aligner, MatrixAligner
from diffy.io.text_io import DEFAULT_TAB_SIZE

DEFAULT_REPORT = {"max_rows": 50, "width": 30}

def load_config(path: str | Path) -> Dict[str, Any]:
    """
    Read a JSON or YAML (.yaml/.yml) config file into a dict.
    Malformed files raise ValueError; an empty file is an empty config.
    """
    p = Path(path)
    text = p.read_text(encoding="utf-8")
    if p.suffix.lower() in (".yaml", ".yml"):
        try:
            import yaml  # type: ignore
        except Exception as e:
            raise ImportError("PyYAML is required to load YAML config files. Install with `pip install pyyaml`.") from e
        try:
            return yaml.safe_load(text) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"invalid YAML in {str(p)!r}: {e}") from e
    return json.loads(text or "{}")

def _section(cfg: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = cfg.get(key) or {}
    if isinstance(value, str) and key == "aligner":
        # shorthand: "aligner": "matrix"
        return {"type": value}
    if not isinstance(value, dict):
        raise ValueError(f"config key {key!r} must be a mapping, got {type(value).__name__}")
    return value

def _make_aligner(spec: Dict[str, Any]) -> Aligner:
    t = str(spec.get("type", "matrix")).lower()
    if t in ("matrix", "dp", "levenshtein"):
        return MatrixAligner()
    raise ValueError(f"Unknown aligner type: {t!r}")

def _make_threshold(cfg: Dict[str, Any]) -> Optional[float]:
    if "realign_threshold" not in cfg:
        return DEFAULT_REALIGN_THRESHOLD
    value = cfg["realign_threshold"]
    if value is None:
        return None
    threshold = float(value)
    if not threshold >= 0.0:
        raise ValueError(f"realign_threshold must be >= 0, got {value!r}")
    return threshold

def read_options(cfg: Dict[str, Any]) -> Tuple[int, str]:
    tab_size = int(cfg.get("tab_size", DEFAULT_TAB_SIZE))
    if tab_size < 1:
        raise ValueError(f"tab_size must be at least 1, got {tab_size}")
    encoding = str(cfg.get("encoding") or "utf-8")
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise ValueError(f"unknown encoding: {encoding!r}") from e
    return tab_size, encoding

def report_options(cfg: Dict[str, Any]) -> Dict[str, int]:
    spec = _section(cfg, "report")
    opts = {k: int(spec.get(k, v)) for k, v in DEFAULT_REPORT.items()}
    if opts["max_rows"] < 1 or opts["width"] < 1:
        raise ValueError(f"report max_rows and width must be at least 1, got {opts}")
    return opts

def build_from_config(left: Sequence, right: Sequence, cfg: Dict[str, Any]) -> Tuple[Differ, DiffRequest]:
    req = DiffRequest(
        left=left,
        right=right,
        aligner=_make_aligner(_section(cfg, "aligner")),
        realign_threshold=_make_threshold(cfg),
    )
    return Differ(), req
