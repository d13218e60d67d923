"""
Fast approximate similarity between strings.

A string of n characters is turned into a sorted multiset of 32-bit fingerprints:
one per character (its code point) and one per 4-character sliding window,
n + max(0, n - 3) fingerprints in total. Two sketches are compared by counting the
fingerprints they share (multiset intersection) and dividing by the size of the
larger sketch.

The only hard guarantees are that the result lies in [0, 1] and that identical
strings score exactly 1.0. A window fingerprint is an XOR of rotated code points,
so two different windows can collide; distinct strings may then also score 1.0.
This is an accepted approximation of the scheme and is not corrected for.
"""
from __future__ import annotations
from typing import Tuple
import numpy as np

WINDOW_SIZE = 4
_MASK32 = 0xFFFFFFFF


def rotate_left(values: np.ndarray, shift: int) -> np.ndarray:
    """Rotate each uint32 in values left by shift bits."""
    values = np.asarray(values, dtype=np.uint32)
    shift %= 32
    if shift == 0:
        return values.copy()
    left = np.left_shift(values, np.uint32(shift))
    right = np.right_shift(values, np.uint32(32 - shift))
    return np.bitwise_or(left, right).astype(np.uint32)


def _fingerprints(text: str) -> np.ndarray:
    codes = np.fromiter((ord(c) & _MASK32 for c in text), dtype=np.uint32, count=len(text))
    if len(codes) < WINDOW_SIZE:
        return np.sort(codes)
    windows = (
        rotate_left(codes[:-3], 24)
        ^ rotate_left(codes[1:-2], 16)
        ^ rotate_left(codes[2:-1], 8)
        ^ codes[3:]
    )
    return np.sort(np.concatenate([codes, windows]))


class Sketch:
    __slots__ = ("fingerprints", "_values", "_counts")

    def __init__(self, fingerprints: np.ndarray) -> None:
        fp = np.sort(np.asarray(fingerprints, dtype=np.uint32))
        fp.flags.writeable = False
        values, counts = np.unique(fp, return_counts=True)
        values.flags.writeable = False
        counts.flags.writeable = False
        self.fingerprints = fp
        self._values = values
        self._counts = counts

    @classmethod
    def from_text(cls, text: str) -> "Sketch":
        return cls(_fingerprints(text))

    def __len__(self) -> int:
        return int(self.fingerprints.size)

    def __repr__(self) -> str:
        return f"Sketch(size={len(self)})"

    def unique(self) -> Tuple[np.ndarray, np.ndarray]:
        return self._values, self._counts


def make_sketch(text: str) -> Sketch:
    return Sketch.from_text(text)


def shared_count(a: Sketch, b: Sketch) -> int:
    """
    Size of the multiset intersection of two sketches.

    Equal to the number of matches a merge-walk over the two sorted fingerprint
    arrays finds: every value contributes min(count in a, count in b).
    """
    va, ca = a.unique()
    vb, cb = b.unique()
    _, ia, ib = np.intersect1d(va, vb, assume_unique=True, return_indices=True)
    return int(np.minimum(ca[ia], cb[ib]).sum())


def similarity(a: Sketch, b: Sketch) -> float:
    """
    Estimate how similar the strings behind two sketches are, in [0, 1].

    Two empty sketches are identical (1.0); an empty and a non-empty sketch share
    nothing (0.0). Identical strings always give 1.0. Fingerprint collisions can
    make distinct strings give 1.0 as well (see the module docstring).
    """
    la, lb = len(a), len(b)
    if la == 0 and lb == 0:
        return 1.0
    if la == 0 or lb == 0:
        return 0.0
    return shared_count(a, b) / max(la, lb)
