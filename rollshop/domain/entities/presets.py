from __future__ import annotations

from rollshop.domain.entities.transaction_record import NO_REFUSAL

PRESET_SERVICES: tuple[str, ...] = (
    "sketch",
    "photography",
    "3M mystery box",
    "5M mystery box",
)

PRESET_REFUSAL_TYPES: tuple[str, ...] = (
    NO_REFUSAL,
    "schedule conflict",
    "style mismatch",
    "price objection",
)
