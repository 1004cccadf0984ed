from __future__ import annotations

from dataclasses import dataclass

from cldpy.policy import DEFAULT_DUPLICATE_POLICY, DuplicatePolicy


@dataclass(frozen=True, slots=True)
class AssemblyOptions:
    """World assembler configuration."""

    duplicate_declarations: DuplicatePolicy = DEFAULT_DUPLICATE_POLICY


__all__ = ["AssemblyOptions"]
