from __future__ import annotations


class ContractViolation(AssertionError):
    """A caller broke the contract of an Item, Sequence or Link (a programming defect)."""


class InvariantViolation(AssertionError):
    """An internal state that the algorithms guarantee can never be reached."""
