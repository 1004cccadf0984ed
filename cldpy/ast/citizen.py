"""Citizen record shared by all nine declaration kinds."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Final

from cldpy.ast.value import Value
from cldpy.syntax import CldSyntaxKind


class CitizenKind(StrEnum):
    ORIGIN = "Origin"
    TIMELINE = "Timeline"
    EVENT = "Event"
    CORE_EVENT = "CoreEvent"
    NICHE = "Niche"
    ERA = "Era"
    GENERATOR = "Generator"
    MEMORY = "Memory"
    IMMUNE = "Immune"


CITIZEN_KIND_BY_DECLARATION: Final[Mapping[CldSyntaxKind, CitizenKind]] = MappingProxyType(
    {
        CldSyntaxKind.ORIGIN_DECL: CitizenKind.ORIGIN,
        CldSyntaxKind.TIMELINE_DECL: CitizenKind.TIMELINE,
        CldSyntaxKind.EVENT_DECL: CitizenKind.EVENT,
        CldSyntaxKind.CORE_EVENT_DECL: CitizenKind.CORE_EVENT,
        CldSyntaxKind.NICHE_DECL: CitizenKind.NICHE,
        CldSyntaxKind.ERA_DECL: CitizenKind.ERA,
        CldSyntaxKind.GENERATOR_DECL: CitizenKind.GENERATOR,
        CldSyntaxKind.MEMORY_DECL: CitizenKind.MEMORY,
        CldSyntaxKind.IMMUNE_DECL: CitizenKind.IMMUNE,
    }
)


def _empty_fields() -> Mapping[str, Value]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class Citizen:
    """One declared entity. `fields` keeps declaration order and is read-only."""

    kind: CitizenKind
    name: str
    fields: Mapping[str, Value] = field(default_factory=_empty_fields)

    def __post_init__(self) -> None:
        if not isinstance(self.fields, MappingProxyType):
            object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __hash__(self) -> int:
        return hash((self.kind, self.name))

    def get(self, key: str) -> Value | None:
        return self.fields.get(key)

    def __str__(self) -> str:
        return f"{self.kind}: {self.name} with {len(self.fields)} fields"


__all__ = ["CITIZEN_KIND_BY_DECLARATION", "Citizen", "CitizenKind"]
