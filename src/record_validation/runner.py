"""
Request runner — validate a JSON request document against a record class.

Request shape (see VALIDATION_REQUEST_SCHEMA)::

    {"record_type": "app.models:User", "record": {"name": ""}}

The record is built WITHOUT validation (``model_construct`` for pydantic
models, the plain constructor for stdlib dataclasses) so every rule runs
through the adapter and surfaces as a message.
"""
import dataclasses
import importlib
import json
import logging
from pathlib import Path
from typing import Any, Union

from jsonschema import ValidationError, validate
from pydantic import BaseModel
from pydantic.dataclasses import is_pydantic_dataclass

from src.config.schemas import VALIDATION_REQUEST_SCHEMA
from src.record_validation.adapter import validate_record
from src.record_validation.errors import InvalidRequest

logger = logging.getLogger(__name__)


def load_record_type(path: str) -> type:
    """Import ``"package.module:ClassName"`` and return the class."""
    module_name, _, attr = path.partition(":")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise InvalidRequest(f"cannot import module '{module_name}': {e}") from e

    record_type = getattr(module, attr, None)
    if record_type is None:
        raise InvalidRequest(f"module '{module_name}' has no attribute '{attr}'")
    return record_type


def build_record(record_type: type, data: dict) -> Any:
    """Instantiate *record_type* from *data* without running its rules."""
    if isinstance(record_type, type) and issubclass(record_type, BaseModel):
        return record_type.model_construct(**data)
    if is_pydantic_dataclass(record_type):
        raise InvalidRequest(
            f"{record_type.__name__} is a pydantic dataclass; it validates on construction"
        )
    if dataclasses.is_dataclass(record_type) and isinstance(record_type, type):
        try:
            return record_type(**data)
        except TypeError as e:
            raise InvalidRequest(f"cannot build {record_type.__name__}: {e}") from e
    raise InvalidRequest(f"'{getattr(record_type, '__name__', record_type)}' is not a record type")


def run_request(request: Union[str, dict]) -> dict:
    """
    Validate one request document.

    Args:
        request: Raw JSON string or already-parsed dict.

    Returns:
        Dict with record_type, valid, messages and failures.

    Raises:
        InvalidRequest: malformed request or unusable record_type.
        InvalidInputKind / EngineError: propagated from the adapter.
    """
    if isinstance(request, dict):
        data = request
    else:
        try:
            data = json.loads(request)
        except json.JSONDecodeError as e:
            raise InvalidRequest(f"Invalid JSON: {e}") from e

    try:
        validate(instance=data, schema=VALIDATION_REQUEST_SCHEMA)
    except ValidationError as e:
        raise InvalidRequest(f"Schema violation: {e.message}") from e

    record_type = load_record_type(data["record_type"])
    record = build_record(record_type, data["record"])
    result = validate_record(record)

    logger.info(
        "%s: valid=%s messages=%d",
        data["record_type"],
        result.valid,
        len(result.messages),
    )
    return {"record_type": data["record_type"], **result.to_dict()}


def run_request_file(path: Union[str, Path]) -> dict:
    """Read a request document from *path* and run it."""
    with open(path, encoding="utf-8") as f:
        return run_request(f.read())
