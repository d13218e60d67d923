from __future__ import annotations
import json
from typing import Any, Dict, List, Optional
from pathlib import Path
from diffy.core.alignment import Alignment, Link, LinkKind
from diffy.core.errors import ContractViolation, InvariantViolation

_KINDS = {k.value for k in LinkKind}


def save_alignment(path: str | Path, alignment: Alignment) -> None:
    save_json(path, alignment.to_dict())


def _link_from_json(item: Any, position: int) -> Link:
    if not isinstance(item, dict) or item.get("kind") not in _KINDS:
        raise ValueError(f"link #{position} is not a {{kind, left, right}} object: {item!r}")
    left, right = item.get("left", -1), item.get("right", -1)
    if not isinstance(left, int) or not isinstance(right, int):
        raise ValueError(f"link #{position} has non-integer indices: {item!r}")
    try:
        return Link(LinkKind(item["kind"]), left, right)
    except ContractViolation as e:
        raise ValueError(f"link #{position} is ill-formed: {e}") from e


def load_alignment(
    path: str | Path,
    left_length: Optional[int] = None,
    right_length: Optional[int] = None,
) -> Alignment:
    """
    Load an alignment saved by save_alignment, or a bare JSON list of links.

    Every link is checked on its own; when both lengths are given the whole
    alignment must also cover 0..left_length-1 and 0..right_length-1 in order.
    Any mismatch raises ValueError.
    """
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        data = json.load(f)
    items: List[Any]
    if isinstance(data, dict) and isinstance(data.get("links"), list):
        items = data["links"]
    elif isinstance(data, list):
        items = data
    else:
        raise ValueError("Unrecognized alignment JSON format")
    alignment = Alignment(_link_from_json(item, n) for n, item in enumerate(items))
    if left_length is not None and right_length is not None:
        try:
            alignment.validate(left_length, right_length)
        except InvariantViolation as e:
            raise ValueError(f"alignment in {str(p)!r} does not fit {left_length} x {right_length}: {e}") from e
    return alignment


def save_json(path: str | Path, obj: Dict[str, Any]) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(obj, f, ensure_ascii=False, indent=2)
