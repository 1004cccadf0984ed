from __future__ import annotations

from dataclasses import dataclass

from cldpy.policy import DEFAULT_DUPLICATE_POLICY, DuplicatePolicy


@dataclass(frozen=True, slots=True)
class BuildOptions:
    """AST builder configuration."""

    duplicate_fields: DuplicatePolicy = DEFAULT_DUPLICATE_POLICY


__all__ = ["BuildOptions"]
