"""
Message resolution — engine failure → display string.

Resolution order for one failure:
1. First location segment must name a field of the record ("Unknown field" otherwise)
2. Walk nested records along the location; the first non-empty custom
   message wins (outer overrides inner)
3. Otherwise the engine default text
"""
import logging
from typing import Any, Optional

from pydantic import Field

from src.config.constants import (
    SOURCE_CUSTOM,
    SOURCE_DEFAULT,
    SOURCE_UNKNOWN_FIELD,
    UNKNOWN_FIELD_MESSAGE,
)
from src.config.settings import ERRORMESSAGE_KEY
from src.models.field_failure import FieldFailure
from src.record_validation.introspection import (
    find_field,
    is_root_model_type,
    nested_record_type,
    record_fields,
)
from src.record_validation.metrics import record_message_source

logger = logging.getLogger(__name__)


def message_field(message: str, default: Any = ..., **rules: Any) -> Any:
    """
    A ``pydantic.Field`` carrying a custom error message.

    Example::

        class User(BaseModel):
            name: str = message_field("name is required", min_length=1)
    """
    extra = dict(rules.pop("json_schema_extra", None) or {})
    extra[ERRORMESSAGE_KEY] = message
    return Field(default, json_schema_extra=extra, **rules)


def _custom_message(failure: FieldFailure, record_type: type) -> Optional[str]:
    """
    Custom message along *failure*'s location, "" when none is declared,
    or None when the first segment is not a field of *record_type*.
    """
    current: Optional[type] = record_type
    start = 0
    if is_root_model_type(record_type):
        # Root model locations start below the implicit "root" field.
        root = record_fields(record_type)["root"]
        if root.message:
            return root.message
        current = nested_record_type(root.annotation)
        start = 1
    for depth, segment in enumerate(failure.loc, start):
        if current is None:
            break
        spec = find_field(current, segment)
        if spec is None:
            if depth == 0:
                return None
            # List indices, dict keys and union tags carry no metadata.
            continue
        if spec.message:
            return spec.message
        current = nested_record_type(spec.annotation)
    return ""


def resolve_message(failure: FieldFailure, record: Any) -> str:
    """
    Display message for *failure* raised while validating *record*.

    Args:
        failure: The engine failure.
        record: The record instance (or record type) that was validated.

    Returns:
        The field's custom message verbatim, the engine default text, or
        ``UNKNOWN_FIELD_MESSAGE`` when the failure names a field the record
        does not declare.
    """
    record_type = record if isinstance(record, type) else type(record)
    if not failure.loc and not is_root_model_type(record_type):
        # Record-level failure (model validator): no field metadata applies.
        record_message_source(SOURCE_DEFAULT)
        return failure.message

    custom = _custom_message(failure, record_type)

    if custom is None:
        logger.warning(
            "Failure on '%s' does not match any field of %s",
            failure.field,
            record_type.__name__,
        )
        record_message_source(SOURCE_UNKNOWN_FIELD)
        return UNKNOWN_FIELD_MESSAGE

    if custom:
        record_message_source(SOURCE_CUSTOM)
        return custom

    record_message_source(SOURCE_DEFAULT)
    return failure.message
