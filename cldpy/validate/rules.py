"""World rules and rule contracts."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Final, Protocol

from cldpy.ast import IdentifierValue, ListValue
from cldpy.diagnostics import (
    VALIDATION_MISSING_ORIGIN,
    VALIDATION_UNRESOLVED_REFERENCE,
)
from cldpy.errors import (
    MissingOriginError,
    TypeMismatchError,
    UnresolvedReferenceError,
    ValidationError,
)
from cldpy.world import World

CORE_ANCHORS_FIELD: Final[str] = "核心锚点"


class WorldRule(Protocol):
    """Semantic rule over an assembled world. `check` returns the failure or None."""

    @property
    def name(self) -> str: ...

    @property
    def code(self) -> str: ...

    def check(self, world: World) -> ValidationError | None: ...


@dataclass(frozen=True, slots=True)
class OriginExistsRule:
    name: str = "OriginExists"
    code: str = VALIDATION_MISSING_ORIGIN.code

    def check(self, world: World) -> ValidationError | None:
        if world.origin is None:
            return MissingOriginError(rule=self.name)
        return None


@dataclass(frozen=True, slots=True)
class CoreAnchorsResolvedRule:
    """Every identifier in `Origin.核心锚点` names a declared CoreEvent.

    An absent field passes. A plain @Event of the same name does not count.
    """

    name: str = "CoreAnchorsResolved"
    code: str = VALIDATION_UNRESOLVED_REFERENCE.code
    field: str = CORE_ANCHORS_FIELD

    def check(self, world: World) -> ValidationError | None:
        origin = world.origin
        if origin is None:
            return MissingOriginError(rule=self.name)

        anchors = origin.get(self.field)
        if anchors is None:
            return None
        label = f"{origin.kind}.{self.field}"
        if not isinstance(anchors, ListValue):
            return TypeMismatchError(f"{label} must be a list", rule=self.name, field=self.field)

        for item in anchors.items:
            if not isinstance(item, IdentifierValue):
                return TypeMismatchError(
                    f"{label} must contain only identifiers", rule=self.name, field=self.field
                )
            if item.name not in world.core_events:
                return UnresolvedReferenceError(
                    rule=self.name,
                    name=item.name,
                    message=f"CoreEvent '{item.name}' referenced in {label} is not defined",
                )
        return None


@dataclass(frozen=True, slots=True)
class PredicateRule:
    """Adapter turning a plain `(name, predicate)` pair into a `WorldRule`.

    The predicate returns True when the world passes.
    """

    name: str
    code: str
    predicate: Callable[[World], bool]
    message: str | None = None

    def check(self, world: World) -> ValidationError | None:
        if self.predicate(world):
            return None
        return ValidationError(
            self.message or f"world rule `{self.name}` failed",
            rule=self.name,
            code=self.code,
        )


def default_world_rules() -> list[WorldRule]:
    """Built-in rules in evaluation order. Returns a fresh list each call."""
    return [OriginExistsRule(), CoreAnchorsResolvedRule()]


def validate_world_rules(rules: Sequence[WorldRule]) -> None:
    seen: set[str] = set()
    for rule in rules:
        if rule.name in seen:
            raise ValueError(f"World rule `{rule.name}` is registered more than once.")
        seen.add(rule.name)
        if not rule.code.startswith("VALIDATION_"):
            raise ValueError(
                f"World rule `{rule.name}` has invalid code `{rule.code}`; expected `VALIDATION_` prefix."
            )


__all__ = [
    "CORE_ANCHORS_FIELD",
    "CoreAnchorsResolvedRule",
    "OriginExistsRule",
    "PredicateRule",
    "WorldRule",
    "default_world_rules",
    "validate_world_rules",
]
