"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from cldpy.ast import Citizen
from cldpy.diagnostics import Diagnostic
from cldpy.errors import CldError, ConstructionError, ValidationError, is_syntax_error
from cldpy.world import World


@dataclass(frozen=True, slots=True)
class CheckRunResult:
    """Outcome of one check run. `world` is None when any stage failed."""

    source_text: str
    citizens: list[Citizen]
    world: World | None
    error: CldError | None
    diagnostics: list[Diagnostic]
    has_errors: bool

    @property
    def is_syntax_error(self) -> bool:
        return self.error is not None and is_syntax_error(self.error)

    @property
    def citizens_built(self) -> bool:
        """True once every declaration was built, even if assembly or validation failed."""
        return self.error is None or isinstance(self.error, (ConstructionError, ValidationError))


__all__ = ["CheckRunResult"]
