from .domain.errors import ExhaustedSequenceError, InvalidSequenceError, UnknownPropertyError
from .donors import (
    ChainedSequence,
    ConstantDonor,
    FixedSequence,
    IndexedSequence,
    MakerDonor,
    RepeatingSequence,
    SameValueDonor,
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
from .maker import (
    Maker,
    Property,
    PropertyLookup,
    a,
    an,
    like,
    list_of,
    make,
    make_many,
    values_of,
    with_,
)
from .ports.donor import Buildable, Donor

__all__ = [
    "Buildable",
    "ChainedSequence",
    "ConstantDonor",
    "Donor",
    "ExhaustedSequenceError",
    "FixedSequence",
    "IndexedSequence",
    "InvalidSequenceError",
    "Maker",
    "MakerDonor",
    "Property",
    "PropertyLookup",
    "RepeatingSequence",
    "SameValueDonor",
    "UnknownPropertyError",
    "a",
    "an",
    "builder_as_donor",
    "chained_sequence",
    "constant",
    "indexed_sequence",
    "like",
    "list_of",
    "make",
    "make_many",
    "repeating_sequence",
    "repeating_sequence_from",
    "sequence",
    "sequence_from",
    "the_same",
    "values_of",
    "with_",
]
