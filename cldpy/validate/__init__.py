from cldpy.validate.rules import (
    CORE_ANCHORS_FIELD,
    CoreAnchorsResolvedRule,
    OriginExistsRule,
    PredicateRule,
    WorldRule,
    default_world_rules,
    validate_world_rules,
)
from cldpy.validate.runner import validate_world

__all__ = [
    "CORE_ANCHORS_FIELD",
    "CoreAnchorsResolvedRule",
    "OriginExistsRule",
    "PredicateRule",
    "WorldRule",
    "default_world_rules",
    "validate_world",
    "validate_world_rules",
]
