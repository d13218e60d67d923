from diffy.core import Differ, DiffRequest, ItemSequence, Link, MatrixAligner, TextLines


def test_differ_realigns_only_the_display():
    left = ItemSequence.of_values(["a", "b", "c"])
    right = ItemSequence.of_values(["a", "x", "c"])
    res = Differ.default().diff(DiffRequest(left=left, right=right))
    assert res.distance == 1.0
    assert list(res.alignment) == [Link.matching(0, 0), Link.different(1, 1), Link.matching(2, 2)]
    assert list(res.display_alignment) == [
        Link.matching(0, 0), Link.left_only(1), Link.right_only(1), Link.matching(2, 2),
    ]
    s = res.summary()
    assert s["distance"] == 1.0
    assert s["matching"] == 2
    assert s["different"] == 0
    assert s["left_only"] == 1
    assert s["right_only"] == 1
    assert s["left_length"] == 3


def test_differ_without_realignment():
    left = ItemSequence.of_values(["a", "b"])
    right = ItemSequence.of_values(["a", "x"])
    res = Differ().diff(DiffRequest(left=left, right=right, realign_threshold=None))
    assert res.display_alignment == res.alignment
    assert res.realign_threshold is None


def test_identical_files():
    lines = TextLines(["same", "same", "other"])
    res = Differ().diff(DiffRequest(left=lines, right=lines))
    assert res.distance == 0.0
    assert res.summary()["matching"] == 3


def test_raw_alignment_ignores_aligner_threshold():
    left = ItemSequence.of_values(["a", "b", "c"])
    right = ItemSequence.of_values(["a", "x", "c"])
    req = DiffRequest(left=left, right=right, aligner=MatrixAligner(realign_threshold=0.5), realign_threshold=None)
    res = Differ().diff(req)
    assert list(res.alignment) == [Link.matching(0, 0), Link.different(1, 1), Link.matching(2, 2)]
    assert res.display_alignment == res.alignment

    req.realign_threshold = 0.5
    res = Differ().diff(req)
    assert list(res.alignment)[1] == Link.different(1, 1)
    assert list(res.display_alignment) == [
        Link.matching(0, 0), Link.left_only(1), Link.right_only(1), Link.matching(2, 2),
    ]
