from __future__ import annotations
import numbers
from typing import Any, Iterable, List, Optional, Protocol
from diffy.core.errors import ContractViolation


class Item(Protocol):
    def cost(self, other: "Item") -> float: ...

    def render(self, max_width: int) -> str: ...


class Sequence(Protocol):
    def __len__(self) -> int: ...

    def item_at(self, index: int) -> Item: ...

    def description(self) -> str: ...


def truncate(text: str, max_width: int) -> str:
    """
    Cut text to at most max_width characters for display.
    When anything is cut, up to three trailing characters become '.',
    but the first character is always kept.
    """
    if len(text) <= max_width:
        return text
    if max_width <= 0:
        return ""
    head = max(1, max_width - 3)
    return text[:head] + "." * (max_width - head)


def check_index(index: int, length: int) -> None:
    if not isinstance(index, numbers.Integral) or isinstance(index, bool) or not 0 <= index < length:
        raise ContractViolation(f"index {index!r} out of range for a sequence of length {length}")


def check_same_family(item: Any, other: Any) -> None:
    if type(other) is not type(item):
        raise ContractViolation(
            f"cannot compare {type(item).__name__} with {type(other).__name__}"
        )


class CharItem:
    __slots__ = ("char",)

    def __init__(self, char: str) -> None:
        if len(char) != 1:
            raise ContractViolation(f"CharItem needs exactly one character, got {char!r}")
        self.char = char

    def cost(self, other: "CharItem") -> float:
        check_same_family(self, other)
        return 0.0 if self.char == other.char else 1.0

    def render(self, max_width: int) -> str:
        return truncate(self.char, max_width)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, CharItem) and other.char == self.char

    def __hash__(self) -> int:
        return hash(self.char)

    def __repr__(self) -> str:
        return f"CharItem({self.char!r})"


class CharSequence:
    """The characters (code points) of a string, one CharItem each."""

    def __init__(self, text: str) -> None:
        self.text = text
        self._items = [CharItem(c) for c in text]

    def __len__(self) -> int:
        return len(self._items)

    def item_at(self, index: int) -> CharItem:
        check_index(index, len(self._items))
        return self._items[index]

    def description(self) -> str:
        return self.text


class ValueItem:
    """Any value compared by plain equality: cost 0.0 when equal, 1.0 otherwise."""

    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value

    def cost(self, other: "ValueItem") -> float:
        check_same_family(self, other)
        return 0.0 if self.value == other.value else 1.0

    def render(self, max_width: int) -> str:
        return truncate(str(self.value), max_width)

    def __repr__(self) -> str:
        return f"ValueItem({self.value!r})"


class ItemSequence:
    def __init__(self, items: Iterable[Item] | None = None, description: Optional[str] = None) -> None:
        self.items: List[Item] = list(items or [])
        self._description = description

    @classmethod
    def of_values(cls, values: Iterable[Any], description: Optional[str] = None) -> "ItemSequence":
        return cls([ValueItem(v) for v in values], description)

    def __len__(self) -> int:
        return len(self.items)

    def item_at(self, index: int) -> Item:
        check_index(index, len(self.items))
        return self.items[index]

    def description(self) -> str:
        if self._description is not None:
            return self._description
        return f"{len(self.items)} items"
