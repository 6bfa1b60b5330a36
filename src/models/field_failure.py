"""
FieldFailure — one rule violation reported by the validation engine.
"""
from dataclasses import dataclass
from typing import Tuple, Union

from src.config.constants import DEFAULT_MESSAGE_TEMPLATE


def default_message(field: str, rule: str) -> str:
    """Engine default text for a failed rule on *field*."""
    return DEFAULT_MESSAGE_TEMPLATE.format(field=field, rule=rule)


@dataclass(frozen=True)
class FieldFailure:
    """A single failed rule with its location inside the record."""

    field: str                              # dotted location, or record class name
    loc: Tuple[Union[str, int], ...]
    rule: str                               # pydantic error type, e.g. "missing"
    detail: str = ""                        # pydantic msg
    message: str = ""                       # engine default text

    @classmethod
    def from_engine_error(cls, error: dict, record_name: str) -> "FieldFailure":
        """
        Build a failure from one entry of ``pydantic.ValidationError.errors()``.

        Record-level errors (empty ``loc``, e.g. from a model validator) are
        attributed to *record_name*.
        """
        loc = tuple(error.get("loc", ()))
        field = ".".join(str(part) for part in loc) if loc else record_name
        rule = error.get("type", "unknown")
        return cls(
            field=field,
            loc=loc,
            rule=rule,
            detail=error.get("msg", ""),
            message=default_message(field, rule),
        )

    @property
    def field_name(self) -> str:
        """Top-level field name, empty for record-level failures."""
        return str(self.loc[0]) if self.loc else ""

    def to_dict(self) -> dict:
        return {
            "field": self.field,
            "loc": list(self.loc),
            "rule": self.rule,
            "detail": self.detail,
            "message": self.message,
        }

    def __repr__(self) -> str:
        return f"FieldFailure('{self.field}', {self.rule})"
