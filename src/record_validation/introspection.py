"""
Record introspection — shape checks, field metadata, and engine input.

A *record* is an instance of a pydantic ``BaseModel`` subclass, a pydantic
dataclass, or a stdlib ``@dataclass``. For each record type this module
builds a field-name → FieldSpec mapping (name, alias, annotation, custom
message) read from the declarations, never from the values.
"""
import dataclasses
import logging
import typing
from dataclasses import dataclass
from typing import Any, Dict, Optional

from pydantic import AliasChoices, BaseModel, RootModel
from pydantic.fields import FieldInfo

from src.config.settings import ERRORMESSAGE_KEY

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldSpec:
    """Declared metadata of one record field."""

    name: str
    alias: Optional[str]
    annotation: Any
    message: str = ""
    validation_alias: Optional[str] = None


# ======================================================================
# Shape checks
# ======================================================================

def is_record_type(tp: Any) -> bool:
    """True for pydantic model classes and dataclass types."""
    if not isinstance(tp, type):
        return False
    return issubclass(tp, BaseModel) or dataclasses.is_dataclass(tp)


def is_record(value: Any) -> bool:
    """True for record *instances* (not classes, not containers, not scalars)."""
    return not isinstance(value, type) and is_record_type(type(value))


def is_root_model_type(tp: Any) -> bool:
    """True for ``RootModel`` subclasses, whose errors are located below ``root``."""
    return isinstance(tp, type) and issubclass(tp, RootModel)


# ======================================================================
# Field metadata
# ======================================================================

def _message_from_field_info(info: Any, key: str) -> str:
    if not isinstance(info, FieldInfo):
        return ""
    extra = info.json_schema_extra
    if isinstance(extra, dict):
        message = extra.get(key)
        if isinstance(message, str):
            return message
    return ""


def _message_from_annotation(annotation: Any, key: str) -> str:
    """Custom message carried by a ``pydantic.Field`` inside ``Annotated[...]``."""
    if typing.get_origin(annotation) is not typing.Annotated:
        return ""
    for meta in typing.get_args(annotation)[1:]:
        message = _message_from_field_info(meta, key)
        if message:
            return message
    return ""


def _validation_key(info: Any) -> Optional[str]:
    """String key pydantic reads the field from, when it is not the name."""
    if not isinstance(info, FieldInfo):
        return None
    key = info.validation_alias
    if isinstance(key, AliasChoices):
        key = next((c for c in key.choices if isinstance(c, str)), None)
    return key if isinstance(key, str) else info.alias


def _model_fields(record_type: type, key: str) -> Dict[str, FieldSpec]:
    specs: Dict[str, FieldSpec] = {}
    for name, info in record_type.model_fields.items():
        specs[name] = FieldSpec(
            name=name,
            alias=info.alias,
            annotation=info.annotation,
            message=_message_from_field_info(info, key),
            validation_alias=_validation_key(info),
        )
    return specs


def _dataclass_fields(record_type: type, key: str) -> Dict[str, FieldSpec]:
    try:
        hints = typing.get_type_hints(record_type, include_extras=True)
    except NameError as e:
        # Unresolvable forward references: fall back to the raw declarations.
        logger.debug("Type hints unavailable for %s: %s", record_type.__name__, e)
        hints = {}

    # Pydantic dataclasses keep their FieldInfo objects here.
    pydantic_fields = getattr(record_type, "__pydantic_fields__", {}) or {}

    specs: Dict[str, FieldSpec] = {}
    for f in dataclasses.fields(record_type):
        annotation = hints.get(f.name, f.type)
        info = pydantic_fields.get(f.name)
        message = (
            _message_from_field_info(info, key)
            or _message_from_field_info(f.default, key)
            or _message_from_annotation(annotation, key)
        )
        if not message:
            meta = f.metadata.get(key)
            message = meta if isinstance(meta, str) else ""
        specs[f.name] = FieldSpec(
            name=f.name,
            alias=info.alias if isinstance(info, FieldInfo) else None,
            annotation=info.annotation if isinstance(info, FieldInfo) else annotation,
            message=message,
            validation_alias=_validation_key(info),
        )
    return specs


def record_fields(record_type: type, key: Optional[str] = None) -> Dict[str, FieldSpec]:
    """
    Field-name → FieldSpec mapping for *record_type*.

    Args:
        record_type: A pydantic model class or dataclass type.
        key: Metadata key holding the custom message (defaults to
            ``ERRORMESSAGE_KEY`` from settings).

    Returns:
        Mapping in declaration order. Empty for non-record types.
    """
    key = key or ERRORMESSAGE_KEY
    if isinstance(record_type, type) and issubclass(record_type, BaseModel):
        return _model_fields(record_type, key)
    if is_record_type(record_type):
        return _dataclass_fields(record_type, key)
    return {}


def find_field(record_type: type, segment: Any) -> Optional[FieldSpec]:
    """Look up a location segment by field name, then by alias or validation alias."""
    if not isinstance(segment, str):
        return None
    specs = record_fields(record_type)
    if segment in specs:
        return specs[segment]
    for spec in specs.values():
        if segment in (spec.alias, spec.validation_alias):
            return spec
    return None


def nested_record_type(annotation: Any) -> Optional[type]:
    """
    First record type reachable from *annotation*.

    Unwraps ``Annotated``, ``Optional``/``Union`` and container parameters,
    so ``Optional[List[Address]]`` yields ``Address``.
    """
    if is_record_type(annotation):
        return annotation
    if typing.get_origin(annotation) is typing.Annotated:
        return nested_record_type(typing.get_args(annotation)[0])
    for arg in typing.get_args(annotation):
        found = nested_record_type(arg)
        if found is not None:
            return found
    return None


# ======================================================================
# Engine input
# ======================================================================

def to_engine_input(value: Any) -> Any:
    """
    Turn a record value into plain data the engine re-validates from scratch.

    Used when the record cannot be serialized by the engine. Nested records
    become mappings keyed by field name (the engine reads them by name), so
    rules on nested fields run too. Root models pass their root value as is.
    Attributes never set (e.g. required fields left out of
    ``model_construct``) are omitted and reported as missing.
    """
    if isinstance(value, RootModel):
        return to_engine_input(value.root)
    if isinstance(value, BaseModel):
        data = {}
        for name in type(value).model_fields:
            if name in value.__dict__:
                data[name] = to_engine_input(value.__dict__[name])
        extra = getattr(value, "__pydantic_extra__", None)
        if extra:
            data.update({k: to_engine_input(v) for k, v in extra.items()})
        return data
    if is_record(value):
        return {
            f.name: to_engine_input(getattr(value, f.name))
            for f in dataclasses.fields(value)
            if f.init and hasattr(value, f.name)
        }
    if isinstance(value, dict):
        return {k: to_engine_input(v) for k, v in value.items()}
    if type(value) in (list, tuple):
        return type(value)(to_engine_input(v) for v in value)
    return value
