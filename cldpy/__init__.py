"""CLD world documents: parse, build citizens, assemble and validate a World."""

from loguru import logger

from cldpy.ast import Citizen, CitizenKind, Value, ValueKind
from cldpy.errors import CldError, ParseError, ValidationError, is_syntax_error
from cldpy.pipeline import CheckRunResult, load_world, run_check
from cldpy.policy import DuplicatePolicy
from cldpy.validate import default_world_rules, validate_world
from cldpy.world import World, assemble_world

logger.disable("cldpy")

__version__ = "0.1.0"

__all__ = [
    "CheckRunResult",
    "Citizen",
    "CitizenKind",
    "CldError",
    "DuplicatePolicy",
    "ParseError",
    "ValidationError",
    "Value",
    "ValueKind",
    "World",
    "assemble_world",
    "default_world_rules",
    "is_syntax_error",
    "load_world",
    "run_check",
    "validate_world",
]
