import pytest
from diffy.core import Alignment, ContractViolation, InvariantViolation, Link, LinkKind


@pytest.mark.parametrize("kind,left,right", [
    (LinkKind.MATCHING, 0, -1),
    (LinkKind.DIFFERENT, -1, 0),
    (LinkKind.LEFT_ONLY, 0, 1),
    (LinkKind.RIGHT_ONLY, -1, -1),
    (LinkKind.LEFT_ONLY, -2, -1),
    ("matching", 0, 0),
])
def test_ill_formed_links_fail_fast(kind, left, right):
    with pytest.raises(ContractViolation):
        Link(kind, left, right)


def test_link_constructors_and_markers():
    assert Link.matching(1, 2) == Link(LinkKind.MATCHING, 1, 2)
    assert Link.left_only(3).right_index == -1
    assert Link.right_only(3).left_index == -1
    assert [k.marker for k in LinkKind] == [" ", "*", "-", "+"]


def test_alignment_views_and_counts():
    alignment = Alignment([
        Link.matching(0, 0),
        Link.left_only(1),
        Link.different(2, 1),
        Link.right_only(2),
    ])
    assert [ln.left_index for ln in alignment.left_links()] == [0, 1, 2]
    assert [ln.right_index for ln in alignment.right_links()] == [0, 1, 2]
    assert alignment.counts() == {"matching": 1, "different": 1, "left_only": 1, "right_only": 1}
    assert alignment[2].kind is LinkKind.DIFFERENT
    alignment.validate(3, 3)


def test_validate_detects_gaps_and_repeats():
    with pytest.raises(InvariantViolation):
        Alignment([Link.left_only(1)]).validate(2, 0)
    with pytest.raises(InvariantViolation):
        Alignment([Link.matching(0, 0), Link.right_only(0)]).validate(1, 1)
    with pytest.raises(InvariantViolation):
        Alignment([Link.matching(0, 0)]).validate(1, 2)


def test_dict_round_trip():
    alignment = Alignment([Link.different(0, 0), Link.right_only(1)])
    d = alignment.to_dict()
    assert d["links"][0] == {"kind": "different", "left": 0, "right": 0}
    assert Alignment.from_dict(d) == alignment


@pytest.mark.parametrize("left,right", [(0.5, -1), (True, -1), ("0", -1), (0, 1.0)])
def test_link_indices_must_be_integers(left, right):
    kind = LinkKind.LEFT_ONLY if right == -1 else LinkKind.MATCHING
    with pytest.raises(ContractViolation):
        Link(kind, left, right)


def test_numpy_integer_indices_are_accepted():
    np = pytest.importorskip("numpy")
    assert Link.matching(np.int64(1), np.int64(2)).left_index == 1
