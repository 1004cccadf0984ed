"""Fold an ordered citizen sequence into a `World`."""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from cldpy.ast import Citizen, CitizenKind
from cldpy.errors import DuplicateDeclarationError, MultipleOriginError
from cldpy.policy import insert_named
from cldpy.world.model import COLLECTION_ATTRIBUTES, World
from cldpy.world.options import AssemblyOptions

_DEFAULT_OPTIONS = AssemblyOptions()


def assemble_world(citizens: Iterable[Citizen], options: AssemblyOptions | None = None) -> World:
    """Route each citizen to its collection, in input order.

    A second Origin raises `MultipleOriginError` before any World exists.
    Repeated names within one collection follow `options.duplicate_declarations`.
    """
    options = options or _DEFAULT_OPTIONS
    origin: Citizen | None = None
    collections: dict[str, dict[str, Citizen]] = {
        attribute: {} for attribute in COLLECTION_ATTRIBUTES.values()
    }

    for citizen in citizens:
        if citizen.kind == CitizenKind.ORIGIN:
            if origin is not None:
                raise MultipleOriginError(origin.name, citizen.name)
            origin = citizen
            continue

        replaced = insert_named(
            collections[COLLECTION_ATTRIBUTES[citizen.kind]],
            citizen.name,
            citizen,
            policy=options.duplicate_declarations,
            rejection=lambda: DuplicateDeclarationError(citizen.kind, citizen.name),
        )
        if replaced:
            logger.debug("{} `{}` overwritten by later declaration", citizen.kind, citizen.name)

    world = World(origin=origin, **collections)
    logger.debug("assembled world with {} citizens", len(world))
    return world


__all__ = ["assemble_world"]
