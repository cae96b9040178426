#!/usr/bin/env python3
"""
Operation Outcomes

Author: Ken Brill
Version: 1.0
Date: October 2026
License: MIT License

Typed outcomes returned by every metadata operation so runner scripts can
branch on what happened instead of reading console output.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ConfigurationError(ValueError):
    """Raised when an object, field or name-field definition is incomplete."""


class Outcome(str, Enum):
    CREATED = 'created'
    UPDATED = 'updated'
    SKIPPED_DUPLICATE = 'skipped_duplicate'
    SKIPPED_MISSING = 'skipped_missing'
    NOT_APPLICABLE = 'not_applicable'
    FAILED = 'failed'


@dataclass(frozen=True)
class OperationResult:
    outcome: Outcome
    target: str
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome not in (Outcome.FAILED, Outcome.SKIPPED_MISSING)
