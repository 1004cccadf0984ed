"""Duplicate-name policy shared by field maps and world collections."""

from __future__ import annotations

from collections.abc import Callable, MutableMapping
from enum import StrEnum
from typing import Final, TypeVar


class DuplicatePolicy(StrEnum):
    """What happens when a name is inserted twice into the same mapping."""

    OVERWRITE = "overwrite"
    REJECT = "reject"


DEFAULT_DUPLICATE_POLICY: Final[DuplicatePolicy] = DuplicatePolicy.OVERWRITE


V = TypeVar("V")


def insert_named(
    target: MutableMapping[str, V],
    key: str,
    value: V,
    *,
    policy: DuplicatePolicy,
    rejection: Callable[[], Exception],
) -> bool:
    """Insert `value` under `key`; returns True when an earlier entry was replaced.

    Under `REJECT` an existing key raises the exception built by `rejection`
    and leaves `target` untouched.
    """
    replaced = key in target
    if replaced and policy == DuplicatePolicy.REJECT:
        raise rejection()
    target[key] = value
    return replaced


__all__ = ["DEFAULT_DUPLICATE_POLICY", "DuplicatePolicy", "insert_named"]
