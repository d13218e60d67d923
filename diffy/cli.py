from __future__ import annotations
import argparse
import logging
import sys
from typing import Any, Dict, List, Optional
from diffy.core.engine import edit_distance
from diffy.core.text_line import TextLines
from diffy.io.json_io import save_json
from diffy.io.text_io import read_lines
from diffy.io import load_config, build_from_config, read_options, report_options
from diffy.reporting import build_json_report, dump_alignment, format_text_report
from diffy import __version__


class _ExitError(Exception):
    def __init__(self, message: str, code: int) -> None:
        super().__init__(message)
        self.code = code


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def _non_negative_float(text: str) -> float:
    value = float(text)
    if not value >= 0.0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {text}")
    return value


def _read(path: str, tab_size: int, encoding: str, code: int) -> TextLines:
    try:
        return read_lines(path, tab_size=tab_size, encoding=encoding)
    except (FileNotFoundError, IsADirectoryError) as e:
        raise _ExitError(str(e), 1) from e
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise _ExitError(f"could not read {path!r}: {e}", code) from e


def _load_cfg(path: Optional[str]) -> Dict[str, Any]:
    if not path:
        return {}
    try:
        cfg = load_config(path)
    except (OSError, ValueError, ImportError) as e:
        raise _ExitError(f"could not load config {path!r}: {e}", 1) from e
    if not isinstance(cfg, dict):
        raise _ExitError(f"config {path!r} must hold a mapping at the top level", 1)
    return cfg


def _load_inputs(args: argparse.Namespace, cfg: Dict[str, Any]) -> tuple[TextLines, TextLines]:
    try:
        tab_size, encoding = read_options(cfg)
    except (ValueError, TypeError) as e:
        raise _ExitError(f"bad config: {e}", 1) from e
    if getattr(args, "tab_size", None) is not None:
        tab_size = args.tab_size
    left = _read(args.left, tab_size, encoding, 2)
    right = _read(args.right, tab_size, encoding, 3)
    return left, right


def _cmd_diff(args: argparse.Namespace) -> None:
    cfg = _load_cfg(args.config)
    left, right = _load_inputs(args, cfg)
    try:
        differ, req = build_from_config(left, right, cfg)
        opts = report_options(cfg)
    except (ValueError, TypeError) as e:
        raise _ExitError(f"bad config: {e}", 1) from e
    if args.no_realign:
        req.realign_threshold = None
    elif args.threshold is not None:
        req.realign_threshold = args.threshold
    result = differ.diff(req)

    if args.max_rows is not None:
        opts["max_rows"] = args.max_rows

    if args.dump:
        dump_alignment(result.alignment, left, right, result.distance, sys.stderr, width=opts["width"])

    if args.out:
        save_json(args.out, build_json_report(result, width=opts["width"]))
    else:
        print(format_text_report(
            result,
            max_rows=opts["max_rows"],
            width=opts["width"],
            title=f"{args.left} vs {args.right}",
        ))


def _cmd_distance(args: argparse.Namespace) -> None:
    cfg = _load_cfg(args.config)
    left, right = _load_inputs(args, cfg)
    print(f"{edit_distance(left, right):g}")


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="diffy", description="Side-by-side line diff")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_diff = sub.add_parser("diff", help="Align two text files line by line and report the result")
    p_diff.add_argument("left", help="Path to the left (old) file")
    p_diff.add_argument("right", help="Path to the right (new) file")
    p_diff.add_argument("--config", required=False, help="Path to configuration file (JSON/YAML)")
    group = p_diff.add_mutually_exclusive_group()
    group.add_argument("--threshold", type=_non_negative_float, help="Realign pairs whose cost exceeds this value")
    group.add_argument("--no-realign", action="store_true", help="Show the raw alignment")
    p_diff.add_argument("--tab-size", type=_positive_int, help="Tab stop width used when reading the files")
    p_diff.add_argument("--max-rows", type=_positive_int, help="Maximum rows in the text report")
    p_diff.add_argument("--out", required=False, help="Path to write the JSON report")
    p_diff.add_argument("--dump", action="store_true", help="Write the diagnostic alignment table to stderr")

    p_dist = sub.add_parser("distance", help="Print only the line edit distance of two files")
    p_dist.add_argument("left", help="Path to the left file")
    p_dist.add_argument("right", help="Path to the right file")
    p_dist.add_argument("--config", required=False, help="Path to configuration file (JSON/YAML)")
    p_dist.add_argument("--tab-size", type=_positive_int, help="Tab stop width used when reading the files")

    sub.add_parser("version", help="Show diffy version and exit")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "version":
        print(__version__)
        return

    try:
        if args.cmd == "diff":
            _cmd_diff(args)
        elif args.cmd == "distance":
            _cmd_distance(args)
    except _ExitError as e:
        print(f"error: {e}", file=sys.stderr)
        print(f"Exit {e.code}.", file=sys.stderr)
        raise SystemExit(e.code)

if __name__ == "__main__":
    main()
