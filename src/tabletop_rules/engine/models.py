"""Pydantic V2 schemas for the rules engine call contract.

These are the values that cross the boundary between the host (the
combat-action handler) and an engine. They carry no behaviour beyond
validation, so a host can drop ``model_dump()`` output straight into an
API response or a persisted message log.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from tabletop_rules.core.exceptions import ValidationError


class AbilityCheckRequest(BaseModel):
    """A request to resolve one ability check.

    ``actor_id`` and ``skill`` are opaque: they are never validated
    against a character store, and an unknown skill resolves to a zero
    modifier. The camelCase spellings used by JSON hosts are accepted
    on input.

    Attributes:
        actor_id: Identifier of the acting character.
        skill: Skill or stat the check is made with.
        difficulty: Target number, or None to use the system default.
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="forbid",
    )

    actor_id: str = Field(
        validation_alias=AliasChoices("actor_id", "actorId"),
        description="Acting character",
    )
    skill: str = Field(description="Skill or stat used")
    difficulty: int | None = Field(default=None, description="Target number")


class AbilityCheckResult(BaseModel):
    """The outcome of an ability check.

    Reproducible only by replaying the same seed and call sequence; the
    stored fields alone are not enough to recompute it.

    Attributes:
        success: Whether the check succeeded.
        roll: The raw dice result before modifiers.
        total: The roll plus the skill modifier.
        margin: ``total`` minus the difficulty that was applied.
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="forbid",
    )

    success: bool = Field(description="Check succeeded")
    roll: int = Field(description="Raw dice result")
    total: int = Field(description="Roll plus modifier")
    margin: int = Field(description="Total minus difficulty")


class TurnOrderEntry(BaseModel):
    """One actor's place in the turn order.

    Attributes:
        actor_id: Identifier of the actor.
        initiative: Initiative value the order was sorted on.
        rank: 1-based position; lower ranks act first.
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="forbid",
    )

    actor_id: str = Field(description="Actor identifier")
    initiative: int = Field(description="Initiative value")
    rank: Annotated[int, Field(ge=1, description="1-based turn position")]


def as_request(request: AbilityCheckRequest | Mapping[str, Any]) -> AbilityCheckRequest:
    """Accept a request model or the plain mapping a host decoded from JSON.

    Raises:
        ValidationError: If the request is not a mapping, or a field is
            missing or has the wrong type.
    """
    if isinstance(request, AbilityCheckRequest):
        return request
    if not isinstance(request, Mapping):
        raise ValidationError(
            "Ability check request must be a mapping or AbilityCheckRequest",
            field_name="request",
            invalid_value=request,
        )
    try:
        return AbilityCheckRequest.model_validate(dict(request))
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        raise ValidationError(
            f"Invalid ability check request: {first['msg']}",
            field_name=".".join(str(part) for part in first["loc"]) or None,
            details={"validation_errors": str(exc)},
        ) from exc


__all__ = [
    "AbilityCheckRequest",
    "AbilityCheckResult",
    "TurnOrderEntry",
    "as_request",
]
