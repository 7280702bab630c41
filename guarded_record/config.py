"""Central configuration for the guarded record package."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RejectionPolicy(str, Enum):
    """How failing ``set``/``remove`` calls are signaled."""

    REPORT = "report"
    RAISE = "raise"


@dataclass(slots=True, frozen=True)
class Settings:
    rejection_policy: RejectionPolicy
    json_indent: int | None
    log_format: str
    log_level: str


SETTINGS = Settings(
    rejection_policy=RejectionPolicy.REPORT,
    json_indent=None,
    log_format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    log_level="WARNING",
)
