"""Fail-fast validation runner."""

from __future__ import annotations

from collections.abc import Sequence

from loguru import logger

from cldpy.validate.rules import WorldRule, default_world_rules, validate_world_rules
from cldpy.world import World


def validate_world(world: World, rules: Sequence[WorldRule] | None = None) -> None:
    """Run `rules` (default: `default_world_rules()`) in order and raise the first failure."""
    resolved_rules = tuple(rules) if rules is not None else tuple(default_world_rules())
    validate_world_rules(resolved_rules)

    for rule in resolved_rules:
        error = rule.check(world)
        if error is not None:
            logger.debug("rule {} failed: {}", rule.name, error.message)
            raise error
        logger.debug("rule {} passed", rule.name)


__all__ = ["validate_world"]
