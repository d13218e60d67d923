"""
Simple diffy example that aligns two short texts and prints a report
plus the diagnostic alignment table.
"""
import sys
from diffy.core import Differ, DiffRequest
from diffy.io import split_lines
from diffy.reporting import dump_alignment, format_text_report

OLD = """\
Toto, I don't think we're in Kansas anymore.
Beam me up Scotty.
Luke, I am your father.
If you build it, they will come
\tHello, Clarice
"""

NEW = """\
Toto, I've a feeling we're not in Kansas anymore.
Beam us up Scotty.
No, I am your father.
If you build it, he will come
Houston, we have a problem
"""


def main() -> None:
    left = split_lines(OLD)
    right = split_lines(NEW)

    differ = Differ.default()
    res = differ.diff(DiffRequest(left=left, right=right, realign_threshold=0.4))

    print(format_text_report(res, max_rows=30, title="diffy simple example"))
    dump_alignment(res.alignment, left, right, res.distance, sys.stdout)


if __name__ == "__main__":
    main()
