"""Tagged mutation envelope shared by actions and responses.

Architecture:
    A mutation is a closed two-level tagged union. On the wire it is two
    nested single-key objects::

        {"Accounts": {"CreateAccount": {...payload...}}}

    In Python every (subsystem, operation) pair is its own frozen model
    class. The tags live on the class, never on the instance, so a value
    cannot carry more or fewer than one outer and one inner tag.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from ..core.enums import Subsystem


class TaggedMutation(BaseModel):
    """Base class for mutation action and response variants."""

    subsystem: ClassVar[Subsystem]
    operation: ClassVar[str]

    model_config = ConfigDict(frozen=True)

    @classmethod
    def tag(cls) -> tuple[str, str]:
        """Return the (outer, inner) wire tags of this variant."""
        return (cls.subsystem.value, cls.operation)


def split_tags(value: Any) -> tuple[str, str, Any]:
    """Unwrap a wire mutation into (subsystem, operation, payload).

    Raises:
        ValueError: If ``value`` is not two nested single-key objects
    """
    if not isinstance(value, dict) or len(value) != 1:
        raise ValueError("mutation must be an object with exactly one subsystem tag")
    ((subsystem, inner),) = value.items()
    if not isinstance(inner, dict) or len(inner) != 1:
        raise ValueError(
            f"mutation subsystem {subsystem!r} must hold exactly one operation tag"
        )
    ((operation, payload),) = inner.items()
    return subsystem, operation, payload


def build_registry(
    variants: tuple[type[TaggedMutation], ...],
) -> dict[tuple[str, str], type[TaggedMutation]]:
    """Index variant classes by their wire tags."""
    registry: dict[tuple[str, str], type[TaggedMutation]] = {}
    for variant in variants:
        key = variant.tag()
        if key in registry:
            raise ValueError(f"Duplicate mutation tag: {key}")
        registry[key] = variant
    return registry
