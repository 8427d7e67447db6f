"""Helpers shared by the adapters' turn order policies."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from tabletop_rules.core.exceptions import ValidationError
from tabletop_rules.engine.models import TurnOrderEntry


def check_actor_ids(actor_ids: Sequence[str]) -> list[str]:
    """Return ``actor_ids`` as a list, rejecting anything but strings.

    A bare string is refused as well, since iterating it would silently
    turn ``"goblin"`` into six one-letter actors.

    Raises:
        ValidationError: If the argument is not a sequence of strings.
    """
    if isinstance(actor_ids, str) or not isinstance(actor_ids, Sequence):
        raise ValidationError(
            "actor_ids must be a sequence of strings",
            field_name="actor_ids",
            invalid_value=actor_ids,
        )
    for actor_id in actor_ids:
        if not isinstance(actor_id, str):
            raise ValidationError(
                "actor_ids must contain only strings",
                field_name="actor_ids",
                invalid_value=actor_id,
            )
    return list(actor_ids)


def rank_by_initiative(rolled: Iterable[tuple[str, int]]) -> list[TurnOrderEntry]:
    """Rank ``(actor_id, initiative)`` pairs, highest initiative first.

    ``sorted`` is stable, so actors with equal initiative keep their
    input order.
    """
    ordered = sorted(rolled, key=lambda pair: pair[1], reverse=True)
    return [
        TurnOrderEntry(actor_id=actor_id, initiative=initiative, rank=rank)
        for rank, (actor_id, initiative) in enumerate(ordered, start=1)
    ]


__all__ = [
    "check_actor_ids",
    "rank_by_initiative",
]
