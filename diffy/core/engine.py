from __future__ import annotations
import logging
import math
from typing import List, Optional, Protocol, Tuple
import numpy as np
from diffy.core.alignment import Alignment, Link
from diffy.core.comparable import CharSequence, Item, Sequence
from diffy.core.errors import ContractViolation, InvariantViolation
from diffy.core.realign import realign

_log = logging.getLogger(__name__)


def _item_cost(a: Item, b: Item) -> float:
    c = float(a.cost(b))
    if not (c >= 0.0 and math.isfinite(c)):
        raise ContractViolation(f"item cost must be non-negative and finite, got {c!r}")
    return c


def cost_matrix(left: Sequence, right: Sequence) -> np.ndarray:
    """
    Fill the (m+1) x (n+1) matrix of partial edit distances.

    M[i][j] is the cheapest way to turn the first i left items into the first j
    right items; substitutions cost item.cost(other), insertions and deletions 1.
    """
    m, n = len(left), len(right)
    matrix = np.zeros((m + 1, n + 1), dtype=np.float64)
    matrix[0, :] = np.arange(n + 1)
    matrix[:, 0] = np.arange(m + 1)
    right_items = [right.item_at(j) for j in range(n)]
    for i in range(m):
        item = left.item_at(i)
        row, next_row = matrix[i], matrix[i + 1]
        for j in range(n):
            c = _item_cost(item, right_items[j])
            next_row[j + 1] = min(row[j] + c, row[j + 1] + 1.0, next_row[j] + 1.0)
    return matrix


def backtrace(matrix: np.ndarray, left: Sequence, right: Sequence) -> Alignment:
    """
    Walk back from (m, n) to (0, 0) and return the links in ascending index order.

    Ties prefer the diagonal, then the vertical step (a left item deleted), then the
    horizontal step (a right item inserted).
    """
    m, n = len(left), len(right)
    if matrix.shape != (m + 1, n + 1):
        raise ContractViolation(f"matrix shape {matrix.shape} does not fit sequences of {m} and {n}")

    links: List[Link] = []
    i, j = m, n
    while i > 0 or j > 0:
        if i == 0:
            links.append(Link.right_only(j - 1))
            j -= 1
            continue
        if j == 0:
            links.append(Link.left_only(i - 1))
            i -= 1
            continue

        c = _item_cost(left.item_at(i - 1), right.item_at(j - 1))
        diagonal = matrix[i - 1, j - 1] + c
        vertical = matrix[i - 1, j] + 1.0
        horizontal = matrix[i, j - 1] + 1.0
        here, cell = matrix[i, j], (i, j)

        if diagonal <= vertical and diagonal <= horizontal:
            chosen = diagonal
            links.append(Link.matching(i - 1, j - 1) if c == 0 else Link.different(i - 1, j - 1))
            i, j = i - 1, j - 1
        elif vertical <= horizontal:
            chosen = vertical
            links.append(Link.left_only(i - 1))
            i -= 1
        else:
            chosen = horizontal
            links.append(Link.right_only(j - 1))
            j -= 1

        if chosen != here:
            raise InvariantViolation(
                f"cell {cell} predecessor gives {chosen!r}, expected {here!r}"
            )

    links.reverse()
    return Alignment(links)


def align(left: Sequence, right: Sequence, logger: Optional[logging.Logger] = None) -> Tuple[float, Alignment]:
    """
    Compute the edit distance between two sequences and one optimal alignment.

    Needs O(m*n) time and memory because the backtrace reads the whole matrix.
    Use edit_distance() when only the number is wanted.
    """
    log = logger or _log
    matrix = cost_matrix(left, right)
    distance = float(matrix[len(left), len(right)])
    alignment = backtrace(matrix, left, right)
    log.debug(
        "aligned %s / %s: distance=%.3f, %d links",
        left.description(), right.description(), distance, len(alignment),
    )
    return distance, alignment


def edit_distance(left: Sequence, right: Sequence) -> float:
    """Edit distance only, using two rolling rows sized by the shorter sequence."""
    swapped = len(right) > len(left)
    outer, inner = (right, left) if swapped else (left, right)
    n = len(inner)
    inner_items = [inner.item_at(j) for j in range(n)]
    prev = np.arange(n + 1, dtype=np.float64)
    curr = np.empty(n + 1, dtype=np.float64)
    for i in range(len(outer)):
        item = outer.item_at(i)
        curr[0] = i + 1
        for j in range(n):
            other = inner_items[j]
            # cost is always taken left-to-right, whichever side is iterated outside
            c = _item_cost(other, item) if swapped else _item_cost(item, other)
            curr[j + 1] = min(prev[j] + c, prev[j + 1] + 1.0, curr[j] + 1.0)
        prev, curr = curr, prev
    return float(prev[n])


def levenshtein(s: str, t: str) -> int:
    return int(edit_distance(CharSequence(s), CharSequence(t)))


class Aligner(Protocol):
    def align(self, left: Sequence, right: Sequence) -> Tuple[float, Alignment]: ...

    def align_raw(self, left: Sequence, right: Sequence) -> Tuple[float, Alignment]: ...


class MatrixAligner:
    """
    Full-matrix aligner. align() realigns the result when realign_threshold is set;
    align_raw() always returns the alignment straight from the backtrace.
    """

    def __init__(self, realign_threshold: Optional[float] = None, logger: Optional[logging.Logger] = None) -> None:
        self.realign_threshold = realign_threshold
        self.logger = logger

    def align_raw(self, left: Sequence, right: Sequence) -> Tuple[float, Alignment]:
        return align(left, right, logger=self.logger)

    def align(self, left: Sequence, right: Sequence) -> Tuple[float, Alignment]:
        distance, alignment = self.align_raw(left, right)
        if self.realign_threshold is not None:
            alignment = realign(alignment, left, right, self.realign_threshold, logger=self.logger)
        return distance, alignment
