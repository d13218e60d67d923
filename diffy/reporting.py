from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional, Protocol, Tuple

from diffy.core.alignment import Alignment, Link, LinkKind
from diffy.core.comparable import CharSequence, Sequence, truncate
from diffy.core.differ import DiffResult
from diffy.core.engine import align
from diffy.core.errors import InvariantViolation


class OutputSink(Protocol):
    def write(self, text: str) -> Any: ...


class LoggerSink:
    """Forward written text to a logger, one record per line."""

    def __init__(self, logger: logging.Logger, level: int = logging.DEBUG) -> None:
        self.logger = logger
        self.level = level

    def write(self, text: str) -> None:
        for line in text.splitlines():
            self.logger.log(self.level, line)


def _link_items(link: Link, left: Sequence, right: Sequence) -> Tuple[Any, Any]:
    if link.kind in (LinkKind.MATCHING, LinkKind.DIFFERENT):
        return left.item_at(link.left_index), right.item_at(link.right_index)
    if link.kind is LinkKind.LEFT_ONLY:
        return left.item_at(link.left_index), None
    if link.kind is LinkKind.RIGHT_ONLY:
        return None, right.item_at(link.right_index)
    raise InvariantViolation(f"unknown link kind {link.kind!r}")


def dump_alignment(
    alignment: Alignment,
    left: Sequence,
    right: Sequence,
    distance: float,
    sink: OutputSink,
    *,
    width: int = 30,
) -> None:
    """
    Write a side-by-side diagnostic table of an alignment to sink.

    This is a debugging aid; the exact layout is not stable.
    """
    lines: List[str] = []
    lines.append(f"{'.' * 52} {left.description()}/{right.description()} (edit distance: {distance:g})")
    lines.append("")
    lines.append("edit sequence")
    lines.append("=============")
    lines.append("")
    matching = 0
    for link in alignment:
        left_item, right_item = _link_items(link, left, right)
        if link.kind is LinkKind.MATCHING:
            matching += 1
        left_s = left_item.render(width) if left_item is not None else "-"
        right_s = right_item.render(width) if right_item is not None else "-"
        lines.append(
            f"{link.kind.marker} {link.left_index:2d} {left_s:<{width}} {right_s:<{width}} {link.right_index:2d}"
        )
    lines.append("")
    lines.append("first column legend")
    lines.append("-------------------")
    lines.append('" " copy')
    lines.append('"*" change')
    lines.append('"+" insert')
    lines.append('"-" delete')
    lines.append("")
    lines.append(f"non-matching count, computed edit distance = {len(alignment) - matching}, {distance:g}")
    lines.append("")
    for line in lines:
        sink.write(line + "\n")


def build_alignment_rows(
    alignment: Alignment,
    left: Sequence,
    right: Sequence,
    *,
    width: int = 30,
) -> List[Dict[str, Any]]:
    """
    Turn an alignment into display-friendly rows.

    cost is the item cost for paired rows and None for one-sided rows.
    Line numbers are 1-based; None where a side is missing.
    """
    rows: List[Dict[str, Any]] = []
    for idx, link in enumerate(alignment, start=1):
        left_item, right_item = _link_items(link, left, right)
        cost = None
        if left_item is not None and right_item is not None:
            cost = float(left_item.cost(right_item))
        rows.append(
            {
                "index": idx,
                "kind": link.kind.value,
                "marker": link.kind.marker,
                "left_line": link.left_index + 1 if link.has_left else None,
                "right_line": link.right_index + 1 if link.has_right else None,
                "left": left_item.render(width) if left_item is not None else None,
                "right": right_item.render(width) if right_item is not None else None,
                "cost": cost,
            }
        )
    return rows


def find_alternating_run_positions(
    alignment: Alignment, kind: LinkKind = LinkKind.MATCHING
) -> Tuple[List[int], List[int]]:
    """
    Split each side into alternating runs: even runs hold links of the given kind,
    odd runs hold the rest. Positions mark where runs start; the first run may be
    empty and the last position is the length of that side.
    """
    def run_positions(links: List[Link]) -> List[int]:
        positions = [0]
        prev_is_kind = True
        for index, link in enumerate(links):
            is_kind = link.kind is kind
            if is_kind != prev_is_kind:
                positions.append(index)
            prev_is_kind = is_kind
        positions.append(len(links))
        return positions

    return run_positions(alignment.left_links()), run_positions(alignment.right_links())


def intra_line_runs(left_text: str, right_text: str) -> Tuple[List[int], List[int]]:
    """Character-level run positions for two lines; odd runs are the changed characters."""
    _, char_alignment = align(CharSequence(left_text), CharSequence(right_text))
    return find_alternating_run_positions(char_alignment, LinkKind.MATCHING)


def split_runs(text: str, positions: List[int]) -> List[str]:
    return [text[positions[k]:positions[k + 1]] for k in range(len(positions) - 1)]


def format_alignment_table(
    rows: List[Dict[str, Any]],
    *,
    max_rows: int = 50,
    col_widths: Optional[Dict[str, int]] = None,
) -> str:
    """
    Pretty-print a text table of alignment rows.

    Columns:
      IDX | L# | LEFT | M | RIGHT | R#
    """
    widths = {
        "idx": 4,
        "num": 5,
        "text": 30,
        "mark": 1,
    }
    if col_widths:
        widths.update(col_widths)

    header = (
        f"{'IDX':>{widths['idx']}} | {'L#':>{widths['num']}} | {'LEFT':<{widths['text']}} | "
        f"{'M':^{widths['mark']}} | {'RIGHT':<{widths['text']}} | {'R#':>{widths['num']}}"
    )
    sep = "-" * len(header)

    def num(n: Optional[int]) -> str:
        return "" if n is None else str(n)

    def text(s: Optional[str]) -> str:
        return "" if s is None else truncate(s, widths["text"])

    out_lines = [header, sep]
    shown = 0
    for r in rows:
        if shown >= max_rows:
            break
        out_lines.append(
            f"{r['index']:>{widths['idx']}} | {num(r['left_line']):>{widths['num']}} | "
            f"{text(r['left']):<{widths['text']}} | {r['marker']:^{widths['mark']}} | "
            f"{text(r['right']):<{widths['text']}} | {num(r['right_line']):>{widths['num']}}"
        )
        shown += 1

    if shown < len(rows):
        out_lines.append(f"... ({len(rows) - shown} more rows)")
    return "\n".join(out_lines)


def format_summary(result: DiffResult) -> str:
    s = result.summary()
    lines = [
        f"- distance: {result.distance:.3f}",
        f"- left:  {s['left']}",
        f"- right: {s['right']}",
        f"- matching={s['matching']}, different={s['different']}, "
        f"deleted={s['left_only']}, inserted={s['right_only']}",
    ]
    if result.realign_threshold is None:
        lines.append("- realignment: off")
    else:
        lines.append(f"- realignment threshold: {result.realign_threshold:.3f}")
    return "\n".join(lines)


def _row_texts(link: Link, result: DiffResult) -> Tuple[Optional[str], Optional[str]]:
    left_item, right_item = _link_items(link, result.left, result.right)
    return getattr(left_item, "text", None), getattr(right_item, "text", None)


def build_json_report(result: DiffResult, *, width: int = 30) -> Dict[str, Any]:
    """
    Create a JSON-serializable report: distance, summary, raw and display links,
    display rows, and character run positions for every DIFFERENT row whose items
    carry text.
    """
    rows = build_alignment_rows(result.display_alignment, result.left, result.right, width=width)
    for row, link in zip(rows, result.display_alignment):
        if link.kind is not LinkKind.DIFFERENT:
            continue
        left_text, right_text = _row_texts(link, result)
        if left_text is None or right_text is None:
            continue
        left_runs, right_runs = intra_line_runs(left_text, right_text)
        row["runs"] = {"left": left_runs, "right": right_runs}

    return {
        "distance": result.distance,
        "summary": result.summary(),
        "realign_threshold": result.realign_threshold,
        "alignment": result.alignment.to_dict(),
        "display_alignment": result.display_alignment.to_dict(),
        "rows": rows,
    }


def format_text_report(
    result: DiffResult,
    *,
    max_rows: int = 50,
    width: int = 30,
    title: Optional[str] = None,
) -> str:
    """
    Build a human-friendly text report with:
      - header + distance,
      - summary of link kinds,
      - side-by-side table of the display alignment (first max_rows).
    """
    lines: List[str] = []
    hdr = title or "diffy report"
    lines.append("=" * 80)
    lines.append(hdr)
    lines.append("=" * 80)
    lines.append("Summary:")
    lines.append(format_summary(result))
    lines.append("")
    lines.append("Alignment:")
    rows = build_alignment_rows(result.display_alignment, result.left, result.right, width=width)
    lines.append(format_alignment_table(rows, max_rows=max_rows, col_widths={"text": width}))
    lines.append("=" * 80)
    return "\n".join(lines)
