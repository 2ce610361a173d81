"""Recurrence kinds."""

from enum import Enum
from typing import Any


class Trigger(str, Enum):
    """How often a transaction repeats."""

    ONCE = "ONCE"
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"

    @classmethod
    def parse(cls, value: Any) -> "Trigger":
        """Parse a persisted trigger value, falling back to ONCE.

        Matching is case-sensitive; callers accepting user input should
        upper-case it first.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.ONCE

    @property
    def repeats(self) -> bool:
        return self is not Trigger.ONCE
