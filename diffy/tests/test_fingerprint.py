import math
import numpy as np
import pytest
from diffy.core.fingerprint import Sketch, make_sketch, rotate_left, shared_count, similarity

# Distinct lengths, so no pair of different strings can share every fingerprint.
TEST_STRINGS = ["", "1", "12", "123", "1234", "12345", "123456", "1234567", "12345678"]


def _merge_walk(a, b):
    fa, fb = a.fingerprints.tolist(), b.fingerprints.tolist()
    i = j = count = 0
    while i < len(fa) and j < len(fb):
        if fa[i] == fb[j]:
            i, j, count = i + 1, j + 1, count + 1
        elif fa[i] < fb[j]:
            i += 1
        else:
            j += 1
    return count


def test_similarity_matrix_over_prefixes():
    for s in TEST_STRINGS:
        for t in TEST_STRINGS:
            sim = similarity(make_sketch(s), make_sketch(t))
            assert not math.isnan(sim)
            assert 0.0 <= sim <= 1.0
            if s == t:
                assert sim == 1.0
            else:
                assert sim < 1.0


def test_empty_sketches():
    assert similarity(make_sketch(""), make_sketch("")) == 1.0
    assert similarity(make_sketch(""), make_sketch("x")) == 0.0
    assert similarity(make_sketch("hello"), make_sketch("")) == 0.0


def test_sketch_size():
    assert len(make_sketch("")) == 0
    assert len(make_sketch("abc")) == 3
    assert len(make_sketch("abcd")) == 5
    assert len(make_sketch("abcde")) == 7
    assert len(make_sketch("abcdef")) == 9


def test_sketch_sorted_and_read_only():
    sk = Sketch.from_text("the quick brown fox")
    fp = sk.fingerprints
    assert fp.dtype == np.uint32
    assert np.all(np.diff(fp.astype(np.int64)) >= 0)
    assert fp.flags.writeable is False
    with pytest.raises(ValueError):
        fp[0] = 1


def test_partial_overlap_is_strictly_between():
    sim = similarity(make_sketch("1234"), make_sketch("12345"))
    assert 0.0 < sim < 1.0
    # four characters and the "1234" window are shared out of 7 fingerprints
    assert sim == pytest.approx(5 / 7)


def test_window_fingerprint_is_order_sensitive():
    sim = similarity(make_sketch("abcd"), make_sketch("dcba"))
    assert sim == pytest.approx(4 / 5)


def test_duplicates_count_once_per_pair():
    a, b = make_sketch("aaaa"), make_sketch("aa")
    assert shared_count(a, b) == 2
    assert similarity(a, b) == pytest.approx(2 / 5)


@pytest.mark.parametrize("s,t", [
    ("hello world", "hello there world"),
    ("aaaabbbb", "abababab"),
    ("He’s Alive!", "It’s Alive!"),
    ("mississippi", "missouri"),
])
def test_shared_count_matches_merge_walk(s, t):
    a, b = make_sketch(s), make_sketch(t)
    assert shared_count(a, b) == _merge_walk(a, b)


def test_rotate_left():
    assert int(rotate_left(np.array([1], dtype=np.uint32), 8)[0]) == 256
    assert int(rotate_left(np.array([0x80000000], dtype=np.uint32), 1)[0]) == 1
    assert int(rotate_left(np.array([0x12345678], dtype=np.uint32), 32)[0]) == 0x12345678
    assert int(rotate_left(np.array([0x000000AB], dtype=np.uint32), 24)[0]) == 0xAB000000
