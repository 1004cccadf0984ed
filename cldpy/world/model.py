"""Immutable world aggregate."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from cldpy.ast import Citizen, CitizenKind

if TYPE_CHECKING:
    from cldpy.world.options import AssemblyOptions

COLLECTION_ATTRIBUTES: Final[Mapping[CitizenKind, str]] = MappingProxyType(
    {
        CitizenKind.TIMELINE: "timelines",
        CitizenKind.EVENT: "events",
        CitizenKind.CORE_EVENT: "core_events",
        CitizenKind.NICHE: "niches",
        CitizenKind.ERA: "eras",
        CitizenKind.GENERATOR: "generators",
        CitizenKind.MEMORY: "memories",
        CitizenKind.IMMUNE: "immunes",
    }
)


def _empty() -> Mapping[str, Citizen]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class World:
    """Every citizen of one document, indexed by kind and name.

    `origin` is optional here; its presence is a validation rule.
    """

    origin: Citizen | None = None
    timelines: Mapping[str, Citizen] = field(default_factory=_empty)
    events: Mapping[str, Citizen] = field(default_factory=_empty)
    core_events: Mapping[str, Citizen] = field(default_factory=_empty)
    niches: Mapping[str, Citizen] = field(default_factory=_empty)
    eras: Mapping[str, Citizen] = field(default_factory=_empty)
    generators: Mapping[str, Citizen] = field(default_factory=_empty)
    memories: Mapping[str, Citizen] = field(default_factory=_empty)
    immunes: Mapping[str, Citizen] = field(default_factory=_empty)

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        for attribute in COLLECTION_ATTRIBUTES.values():
            collection = getattr(self, attribute)
            if not isinstance(collection, MappingProxyType):
                object.__setattr__(self, attribute, MappingProxyType(dict(collection)))

    @classmethod
    def from_citizens(
        cls, citizens: Iterable[Citizen], options: AssemblyOptions | None = None
    ) -> World:
        from cldpy.world.assemble import assemble_world

        return assemble_world(citizens, options)

    def collection(self, kind: CitizenKind) -> Mapping[str, Citizen]:
        """Name -> citizen mapping for `kind`. The Origin view holds zero or one entry."""
        if kind == CitizenKind.ORIGIN:
            if self.origin is None:
                return _empty()
            return MappingProxyType({self.origin.name: self.origin})
        return getattr(self, COLLECTION_ATTRIBUTES[kind])

    def get(self, kind: CitizenKind, name: str) -> Citizen | None:
        return self.collection(kind).get(name)

    def citizens(self) -> Iterator[Citizen]:
        if self.origin is not None:
            yield self.origin
        for attribute in COLLECTION_ATTRIBUTES.values():
            yield from getattr(self, attribute).values()

    def counts(self) -> dict[CitizenKind, int]:
        return {kind: len(self.collection(kind)) for kind in CitizenKind}

    def __len__(self) -> int:
        return sum(self.counts().values())

    def __bool__(self) -> bool:
        return True


__all__ = ["COLLECTION_ATTRIBUTES", "World"]
