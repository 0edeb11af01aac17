from __future__ import annotations

from dataclasses import dataclass

import pytest

from fixture_maker.domain.errors import ExhaustedSequenceError
from fixture_maker.donors import MakerDonor, builder_as_donor, indexed_sequence, sequence, the_same
from fixture_maker.maker import Maker, Property, PropertyLookup, with_


@dataclass
class _Ticket:
    code: str


code: Property[_Ticket, str] = Property("code")


def _ticket(lookup: PropertyLookup) -> _Ticket:
    return _Ticket(code=lookup.value_of(code))


def test_maker_donor_builds_new_instance_per_pull() -> None:
    # Each pull is a full build; the property reflects the sequence position at build time.
    donor = builder_as_donor(Maker(_ticket, with_(code, indexed_sequence(lambda i: f"T{i}"))))
    first = donor.next_value()
    second = donor.next_value()
    assert first == _Ticket("T0")
    assert second == _Ticket("T1")
    assert first is not second


def test_maker_donors_share_the_wrapped_builder() -> None:
    # Two donors over one builder pull from the builder's single sequence.
    maker = Maker(_ticket, with_(code, indexed_sequence(lambda i: f"T{i}")))
    left = MakerDonor(maker)
    right = MakerDonor(maker)
    assert left.builder is right.builder
    assert left.next_value().code == "T0"
    assert right.next_value().code == "T1"


def test_maker_donor_propagates_build_failure() -> None:
    # An exhausted nested sequence surfaces unchanged from next_value().
    donor = builder_as_donor(Maker(_ticket, with_(code, sequence("only"))))
    assert donor.next_value().code == "only"
    with pytest.raises(ExhaustedSequenceError):
        donor.next_value()


def test_the_same_builds_once() -> None:
    donor = the_same(Maker(_ticket, with_(code, indexed_sequence(lambda i: f"T{i}"))))
    first = donor.next_value()
    assert donor.next_value() is first
    assert first.code == "T0"


def test_the_same_retries_after_failed_build() -> None:
    # A failed first build is not cached.
    attempts: list[int] = []

    class _Flaky:
        def make(self) -> str:
            attempts.append(1)
            if len(attempts) == 1:
                raise RuntimeError("first build fails")
            return "built"

    donor = the_same(_Flaky())
    with pytest.raises(RuntimeError):
        donor.next_value()
    assert donor.next_value() == "built"
    assert donor.next_value() == "built"
    assert len(attempts) == 2


def test_builder_factories_reject_objects_without_make() -> None:
    with pytest.raises(TypeError):
        builder_as_donor(object())  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        the_same("not a builder")  # type: ignore[arg-type]
