"""Turn validated fixture declarations into makers.

Every call to :func:`build_fixture_makers` creates fresh donors, so two
builds from the same config never share sequence cursors. Fixtures that
reference each other (``make:`` / ``same:``) are built on demand. A
reference cycle is a configuration error.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from fixture_maker.config.loader import ConfigError
from fixture_maker.config.models import AppConfig, ChainedDecl, DonorDecl, IndexedDecl
from fixture_maker.donors import factory
from fixture_maker.maker.maker import Maker, PropertyValue
from fixture_maker.maker.property import Property, PropertyLookup
from fixture_maker.ports.donor import Donor


def build_fixture_makers(config: AppConfig) -> dict[str, Maker[dict[str, Any]]]:
    built: dict[str, Maker[dict[str, Any]]] = {}
    in_progress: list[str] = []

    def build(name: str) -> Maker[dict[str, Any]]:
        if name in built:
            return built[name]
        if name not in config.fixtures:
            raise ConfigError(f"Unknown fixture reference: '{name}'")
        if name in in_progress:
            cycle = " -> ".join([*in_progress[in_progress.index(name):], name])
            raise ConfigError(f"Fixture reference cycle: {cycle}")

        in_progress.append(name)
        properties = [Property(prop_name) for prop_name in config.fixtures[name].properties]
        providers = [
            PropertyValue(prop, _build_donor(decl, build))
            for prop, decl in zip(properties, config.fixtures[name].properties.values())
        ]
        in_progress.pop()

        maker = Maker(_dict_instantiator(properties), *providers)
        built[name] = maker
        return maker

    for fixture_name in config.fixtures:
        build(fixture_name)
    return built


def _dict_instantiator(properties: list[Property[dict[str, Any], Any]]) -> Callable[[PropertyLookup], dict[str, Any]]:
    # Configured fixtures render as plain dicts in declaration order.
    def instantiate(lookup: PropertyLookup) -> dict[str, Any]:
        return {prop.name: lookup.value_of(prop) for prop in properties}

    return instantiate


def _build_donor(decl: DonorDecl, resolve: Callable[[str], Maker[dict[str, Any]]]) -> Donor[Any]:
    kind = decl.kind
    if kind == "constant":
        return factory.constant(decl.constant)
    if kind == "sequence":
        return factory.sequence_from(decl.sequence or [])
    if kind == "repeating":
        return factory.repeating_sequence_from(decl.repeating or [])
    if kind == "indexed":
        assert decl.indexed is not None
        return factory.indexed_sequence(_index_rule(decl.indexed))
    if kind == "chained":
        assert decl.chained is not None
        first, after = _chain_rule(decl.chained)
        return factory.chained_sequence(first, after)
    if kind == "make":
        assert decl.make is not None
        return factory.builder_as_donor(resolve(decl.make))
    assert decl.same is not None
    return factory.the_same(resolve(decl.same))


def _index_rule(decl: IndexedDecl) -> Callable[[int], str]:
    template = decl.format
    offset = decl.offset
    return lambda index: template.format(index=index + offset)


def _chain_rule(decl: ChainedDecl) -> tuple[Callable[[], Any], Callable[[Any], Any]]:
    first = decl.first
    if decl.step is not None:
        step = decl.step
        return (lambda: first), (lambda previous: previous + step)
    template = decl.format
    assert template is not None
    return (lambda: first), (lambda previous: template.format(previous=previous))
