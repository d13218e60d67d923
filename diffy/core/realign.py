from __future__ import annotations
import logging
from typing import List, Optional
from diffy.core.alignment import Alignment, Link, LinkKind
from diffy.core.comparable import Sequence

_log = logging.getLogger(__name__)


def realign(
    alignment: Alignment,
    left: Sequence,
    right: Sequence,
    threshold: float,
    logger: Optional[logging.Logger] = None,
) -> Alignment:
    """
    Split weak DIFFERENT pairs into a delete run followed by an insert run.

    A DIFFERENT link whose items cost more than threshold is replaced by a
    LEFT_ONLY link, emitted at once, and a RIGHT_ONLY link that waits in a pending
    buffer. The buffer is flushed, in order, right before the next link that is kept
    as it is, and at the end. Every left and right index stays covered exactly once;
    the distance is not recomputed.
    """
    log = logger or _log
    out: List[Link] = []
    pending: List[Link] = []
    split = 0
    for link in alignment:
        if link.kind is LinkKind.DIFFERENT:
            c = left.item_at(link.left_index).cost(right.item_at(link.right_index))
            if c > threshold:
                out.append(Link.left_only(link.left_index))
                pending.append(Link.right_only(link.right_index))
                split += 1
                continue
        out.extend(pending)
        pending.clear()
        out.append(link)
    out.extend(pending)
    log.debug("realigned with threshold %.3f: %d weak pairs split", threshold, split)
    return Alignment(out)
