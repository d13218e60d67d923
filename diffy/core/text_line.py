from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List
from diffy.core.comparable import check_index, check_same_family, truncate
from diffy.core.fingerprint import Sketch, similarity

# Line similarities below this are treated as "nothing in common".
SIMILARITY_FLOOR = 0.6


@dataclass(frozen=True)
class TextLine:
    text: str
    sketch: Sketch = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "sketch", Sketch.from_text(self.text))

    def similarity(self, other: "TextLine") -> float:
        check_same_family(self, other)
        s = similarity(self.sketch, other.sketch)
        return 0.0 if s < SIMILARITY_FLOOR else s

    def cost(self, other: "TextLine") -> float:
        return 1.0 - self.similarity(other)

    def render(self, max_width: int) -> str:
        return truncate(self.text, max_width)


class TextLines:
    def __init__(self, lines: Iterable[TextLine | str] | None = None) -> None:
        self.lines: List[TextLine] = [
            ln if isinstance(ln, TextLine) else TextLine(ln) for ln in (lines or [])
        ]

    def __len__(self) -> int:
        return len(self.lines)

    def item_at(self, index: int) -> TextLine:
        check_index(index, len(self.lines))
        return self.lines[index]

    def description(self) -> str:
        n = len(self.lines)
        return "1 line" if n == 1 else f"{n} lines"

    def texts(self) -> List[str]:
        return [ln.text for ln in self.lines]
