from .errors import ContractViolation, InvariantViolation
from .comparable import Item, Sequence, CharItem, CharSequence, ValueItem, ItemSequence, truncate
from .fingerprint import Sketch, make_sketch, similarity
from .text_line import TextLine, TextLines, SIMILARITY_FLOOR
from .alignment import LinkKind, Link, Alignment
from .engine import cost_matrix, backtrace, align, edit_distance, levenshtein, Aligner, MatrixAligner
from .realign import realign
from .differ import Differ, DiffRequest, DiffResult

__all__ = [
    "ContractViolation",
    "InvariantViolation",
    "Item",
    "Sequence",
    "CharItem",
    "CharSequence",
    "ValueItem",
    "ItemSequence",
    "truncate",
    "Sketch",
    "make_sketch",
    "similarity",
    "TextLine",
    "TextLines",
    "SIMILARITY_FLOOR",
    "LinkKind",
    "Link",
    "Alignment",
    "cost_matrix",
    "backtrace",
    "align",
    "edit_distance",
    "levenshtein",
    "Aligner",
    "MatrixAligner",
    "realign",
    "Differ",
    "DiffRequest",
    "DiffResult",
]
