from .maker import (
    Instantiator,
    LikeProvider,
    Maker,
    PropertyProvider,
    PropertyValue,
    a,
    an,
    like,
    list_of,
    make,
    make_many,
    values_of,
    with_,
)
from .property import MISSING, Property, PropertyLookup

__all__ = [
    "Instantiator",
    "LikeProvider",
    "MISSING",
    "Maker",
    "Property",
    "PropertyLookup",
    "PropertyProvider",
    "PropertyValue",
    "a",
    "an",
    "like",
    "list_of",
    "make",
    "make_many",
    "values_of",
    "with_",
]
