from .computed import ChainedSequence, IndexedSequence
from .constant import ConstantDonor
from .factory import (
    builder_as_donor,
    chained_sequence,
    constant,
    indexed_sequence,
    repeating_sequence,
    repeating_sequence_from,
    sequence,
    sequence_from,
    the_same,
)
from .maker_donor import MakerDonor, SameValueDonor
from .sequences import FixedSequence, RepeatingSequence

__all__ = [
    "ChainedSequence",
    "ConstantDonor",
    "FixedSequence",
    "IndexedSequence",
    "MakerDonor",
    "RepeatingSequence",
    "SameValueDonor",
    "builder_as_donor",
    "chained_sequence",
    "constant",
    "indexed_sequence",
    "repeating_sequence",
    "repeating_sequence_from",
    "sequence",
    "sequence_from",
    "the_same",
]
