"""Parser configuration options."""

from dataclasses import dataclass

DEFAULT_MAX_NESTING_DEPTH = 64


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Limits controlling how much structure one document may contain."""

    max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH

    def __post_init__(self) -> None:
        if self.max_nesting_depth < 1:
            raise ValueError("max_nesting_depth must be at least 1")
