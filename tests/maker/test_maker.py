from __future__ import annotations

from dataclasses import dataclass

import pytest

from fixture_maker.domain.errors import ExhaustedSequenceError, UnknownPropertyError
from fixture_maker.donors import ConstantDonor, MakerDonor, constant, indexed_sequence, repeating_sequence, sequence
from fixture_maker.maker import (
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


@dataclass
class _Person:
    name: str
    age: int


@dataclass
class _Team:
    lead: _Person
    motto: str


name: Property[_Person, str] = Property("name")
age: Property[_Person, int] = Property("age")
lead: Property[_Team, _Person] = Property("lead")
motto: Property[_Team, str] = Property("motto")


def _person(lookup: PropertyLookup) -> _Person:
    return _Person(name=lookup.value_of(name, "Nobody"), age=lookup.value_of(age, 30))


def _team(lookup: PropertyLookup) -> _Team:
    return _Team(lead=lookup.value_of(lead), motto=lookup.value_of(motto, "go"))


def test_maker_uses_defaults_when_nothing_configured() -> None:
    assert make(a(_person)) == _Person("Nobody", 30)


def test_with_wraps_plain_values_in_constant_donor() -> None:
    clause = with_(name, "Alice")
    assert isinstance(clause.donor, ConstantDonor)
    assert make(a(_person, clause)) == _Person("Alice", 30)


def test_with_keeps_donors_as_is() -> None:
    # Donor values are pulled per instance, not frozen at configuration time.
    maker = a(_person, with_(name, sequence("Alice", "Bob")))
    assert [make(maker).name, make(maker).name] == ["Alice", "Bob"]
    with pytest.raises(ExhaustedSequenceError):
        make(maker)


def test_with_wraps_makers_in_maker_donor() -> None:
    # A maker as a property value yields a fresh nested object per build.
    person = a(_person, with_(name, indexed_sequence(lambda i: f"P{i}")))
    clause = with_(lead, person)
    assert isinstance(clause.donor, MakerDonor)

    team = an(_team, clause)
    first, second = make(team), make(team)
    assert first.lead.name == "P0"
    assert second.lead.name == "P1"
    assert first.lead is not second.lead


def test_later_clause_overrides_earlier_one() -> None:
    maker = a(_person, with_(age, 10), with_(age, 20))
    assert make(maker).age == 20


def test_like_copies_donors_and_allows_overrides() -> None:
    ripe = a(_person, with_(name, "Alice"), with_(age, 40))
    derived = a(_person, like(ripe), with_(age, 12))
    assert make(derived) == _Person("Alice", 12)
    assert make(ripe) == _Person("Alice", 40)


def test_derived_makers_share_donor_instances() -> None:
    # but()/like() reuse donors, so a sequence keeps advancing across derivatives.
    base = a(_person, with_(name, repeating_sequence("A", "B", "C")))
    older = base.but(with_(age, 90))
    assert make(base).name == "A"
    assert make(older) == _Person("B", 90)
    assert make(base).name == "C"


def test_but_leaves_base_maker_unchanged() -> None:
    base = a(_person, with_(age, 1))
    changed = base.but(with_(age, 2))
    assert make(base).age == 1
    assert make(changed).age == 2
    assert age in changed.donors and age in base.donors


def test_value_of_without_default_raises_for_missing_property() -> None:
    with pytest.raises(UnknownPropertyError) as exc:
        make(a(_team))
    assert exc.value.property_name == "lead"
    assert "lead" in str(exc.value)


def test_value_of_pulls_donor_defaults_only_when_missing() -> None:
    default_names = sequence("Default")
    lookup_configured = PropertyLookup({name: constant("Set")})
    assert lookup_configured.value_of(name, default_names) == "Set"
    assert default_names.remaining == 1

    lookup_empty = PropertyLookup({})
    assert lookup_empty.value_of(name, default_names) == "Default"
    assert not lookup_empty.has(name)
    assert lookup_configured.has(name)


def test_value_of_default_with_next_value_is_pulled_unless_wrapped() -> None:
    # Defaults are matched structurally; constant() hands such an object out as is.
    class _Ticket:
        def next_value(self) -> str:
            return "pulled"

    ticket = _Ticket()
    lookup = PropertyLookup({})
    assert lookup.value_of(name, ticket) == "pulled"
    assert lookup.value_of(name, constant(ticket)) is ticket


def test_properties_are_identity_keyed() -> None:
    # Two properties with the same name are distinct keys.
    other_name: Property[_Person, str] = Property("name")
    maker = a(_person, with_(other_name, "Ignored"))
    assert make(maker).name == "Nobody"


def test_make_many_and_list_helpers() -> None:
    maker = a(_person, with_(age, indexed_sequence(lambda i: i)))
    assert [p.age for p in make_many(maker, 3)] == [0, 1, 2]
    assert make_many(maker, 0) == []
    with pytest.raises(ValueError):
        make_many(maker, -1)

    assert list_of(constant(1), sequence(2), repeating_sequence(3)) == [1, 2, 3]


def test_values_of_is_lazy() -> None:
    # Exhaustion surfaces only when the failing pull is reached.
    pulled = values_of(sequence("a", "b"), 3)
    assert next(pulled) == "a"
    assert next(pulled) == "b"
    with pytest.raises(ExhaustedSequenceError):
        next(pulled)


def test_failed_build_keeps_other_donor_state() -> None:
    # A failing donor aborts that build only; a corrected retry continues from valid state.
    ages = indexed_sequence(lambda i: i)
    names = sequence("Only")
    maker = a(_person, with_(age, ages), with_(name, names))
    assert make(maker) == _Person("Only", 0)
    with pytest.raises(ExhaustedSequenceError):
        make(maker)
    fixed = maker.but(with_(name, "Fixed"))
    assert make(fixed) == _Person("Fixed", 1)


def test_maker_repr_lists_properties() -> None:
    maker = Maker(_person, with_(name, "x"), with_(age, 1))
    assert "name" in repr(maker) and "age" in repr(maker)
