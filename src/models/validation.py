"""
ValidationResult — encapsulates one record validation outcome.
"""
from dataclasses import dataclass, field
from typing import List

from src.models.field_failure import FieldFailure


@dataclass
class ValidationResult:
    """Resolved messages plus the engine failures they came from."""

    valid: bool
    messages: List[str] = field(default_factory=list)
    failures: List[FieldFailure] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "messages": list(self.messages),
            "failures": [f.to_dict() for f in self.failures],
        }
