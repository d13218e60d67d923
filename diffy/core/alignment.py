from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import numbers
from typing import Any, Dict, Iterable, Iterator, List, Tuple
from diffy.core.errors import ContractViolation, InvariantViolation


class LinkKind(Enum):
    MATCHING = "matching"
    DIFFERENT = "different"
    LEFT_ONLY = "left_only"
    RIGHT_ONLY = "right_only"

    @property
    def marker(self) -> str:
        return _MARKERS[self]


_MARKERS = {
    LinkKind.MATCHING: " ",
    LinkKind.DIFFERENT: "*",
    LinkKind.LEFT_ONLY: "-",
    LinkKind.RIGHT_ONLY: "+",
}


@dataclass(frozen=True)
class Link:
    kind: LinkKind
    left_index: int = -1
    right_index: int = -1

    def __post_init__(self) -> None:
        if not isinstance(self.kind, LinkKind):
            raise ContractViolation(f"link kind must be a LinkKind, got {self.kind!r}")
        for index in (self.left_index, self.right_index):
            if not isinstance(index, numbers.Integral) or isinstance(index, bool):
                raise ContractViolation(f"link indices must be integers, got {index!r}")
        has_left = self.left_index >= 0
        has_right = self.right_index >= 0
        if self.left_index < -1 or self.right_index < -1:
            raise ContractViolation(f"bad link indices: {self}")
        if self.kind in (LinkKind.MATCHING, LinkKind.DIFFERENT):
            ok = has_left and has_right
        elif self.kind is LinkKind.LEFT_ONLY:
            ok = has_left and not has_right
        elif self.kind is LinkKind.RIGHT_ONLY:
            ok = has_right and not has_left
        else:
            raise InvariantViolation(f"unknown link kind {self.kind!r}")
        if not ok:
            raise ContractViolation(f"index pattern does not fit {self.kind.name}: {self}")

    @classmethod
    def matching(cls, left_index: int, right_index: int) -> "Link":
        return cls(LinkKind.MATCHING, left_index, right_index)

    @classmethod
    def different(cls, left_index: int, right_index: int) -> "Link":
        return cls(LinkKind.DIFFERENT, left_index, right_index)

    @classmethod
    def left_only(cls, left_index: int) -> "Link":
        return cls(LinkKind.LEFT_ONLY, left_index, -1)

    @classmethod
    def right_only(cls, right_index: int) -> "Link":
        return cls(LinkKind.RIGHT_ONLY, -1, right_index)

    @property
    def has_left(self) -> bool:
        return self.left_index >= 0

    @property
    def has_right(self) -> bool:
        return self.right_index >= 0

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "left": self.left_index, "right": self.right_index}

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Link":
        return Link(LinkKind(d["kind"]), int(d.get("left", -1)), int(d.get("right", -1)))


class Alignment:
    """
    An ordered, gap-free sequence of links between a left and a right sequence.

    Present left indices, read in order, are exactly 0..m-1 (and likewise the right
    indices are 0..n-1). Alignments are never modified once built; rewriting one
    (see realign) produces a new Alignment.
    """

    __slots__ = ("_links",)

    def __init__(self, links: Iterable[Link] = ()) -> None:
        self._links: Tuple[Link, ...] = tuple(links)

    @property
    def links(self) -> Tuple[Link, ...]:
        return self._links

    def __len__(self) -> int:
        return len(self._links)

    def __iter__(self) -> Iterator[Link]:
        return iter(self._links)

    def __getitem__(self, index: int) -> Link:
        return self._links[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alignment):
            return NotImplemented
        return self._links == other._links

    def __hash__(self) -> int:
        return hash(self._links)

    def __repr__(self) -> str:
        return f"Alignment({list(self._links)!r})"

    def left_links(self) -> List[Link]:
        return [ln for ln in self._links if ln.has_left]

    def right_links(self) -> List[Link]:
        return [ln for ln in self._links if ln.has_right]

    def count(self, kind: LinkKind) -> int:
        return sum(1 for ln in self._links if ln.kind is kind)

    def counts(self) -> Dict[str, int]:
        return {kind.value: self.count(kind) for kind in LinkKind}

    def validate(self, left_length: int, right_length: int) -> None:
        """Raise InvariantViolation unless the links cover 0..m-1 and 0..n-1 exactly once, in order."""
        lefts = [ln.left_index for ln in self.left_links()]
        rights = [ln.right_index for ln in self.right_links()]
        if lefts != list(range(left_length)):
            raise InvariantViolation(f"left indices {lefts} do not cover 0..{left_length - 1}")
        if rights != list(range(right_length)):
            raise InvariantViolation(f"right indices {rights} do not cover 0..{right_length - 1}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "schema_version": "1",
            "links": [ln.to_dict() for ln in self._links],
        }

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Alignment":
        return Alignment(Link.from_dict(item) for item in d.get("links", []))
