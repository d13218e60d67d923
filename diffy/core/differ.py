from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from diffy.core.alignment import Alignment
from diffy.core.comparable import Sequence
from diffy.core.engine import Aligner, MatrixAligner
from diffy.core.realign import realign

_log = logging.getLogger(__name__)

DEFAULT_REALIGN_THRESHOLD = 0.4


@dataclass
class DiffRequest:
    left: Sequence
    right: Sequence
    aligner: Aligner = field(default_factory=MatrixAligner)
    # None keeps the raw alignment for display as well
    realign_threshold: Optional[float] = DEFAULT_REALIGN_THRESHOLD


@dataclass
class DiffResult:
    distance: float
    alignment: Alignment
    display_alignment: Alignment
    left: Sequence
    right: Sequence
    realign_threshold: Optional[float] = None

    def summary(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "distance": self.distance,
            "left": self.left.description(),
            "right": self.right.description(),
            "left_length": len(self.left),
            "right_length": len(self.right),
        }
        out.update(self.display_alignment.counts())
        return out


class Differ:
    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or _log

    def diff(self, req: DiffRequest) -> DiffResult:
        # only DiffRequest.realign_threshold reshapes the alignment, and only for display
        distance, alignment = req.aligner.align_raw(req.left, req.right)
        display = alignment
        if req.realign_threshold is not None:
            display = realign(alignment, req.left, req.right, req.realign_threshold, logger=self.logger)
        self.logger.debug(
            "diff %s / %s: distance=%.3f, display counts=%s",
            req.left.description(), req.right.description(), distance, display.counts(),
        )
        return DiffResult(
            distance=distance,
            alignment=alignment,
            display_alignment=display,
            left=req.left,
            right=req.right,
            realign_threshold=req.realign_threshold,
        )

    @staticmethod
    def default() -> "Differ":
        return Differ()
