"""
Validation Adapter — run a record's declared rules, return display messages.

Flow:
1. Shape check (record instance only)
2. Engine run: pydantic re-validates the record's current field values
3. Engine usage errors → EngineError
4. Rule violations → one resolved message each, engine order preserved
"""
import logging
from typing import Any, List

from pydantic import PydanticUndefinedAnnotation, PydanticUserError, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from src.config.constants import (
    OUTCOME_ENGINE_ERROR,
    OUTCOME_INVALID,
    OUTCOME_INVALID_INPUT,
    OUTCOME_VALID,
)
from src.models.field_failure import FieldFailure
from src.models.validation import ValidationResult
from src.record_validation.errors import EngineError, InvalidInputKind
from src.record_validation.introspection import is_record, to_engine_input
from src.record_validation.messages import resolve_message
from src.record_validation.metrics import record_outcome, timed_validation

logger = logging.getLogger(__name__)


def collect_failures(record: Any) -> List[FieldFailure]:
    """
    Run the engine on *record* and return every rule violation.

    Raises:
        InvalidInputKind: *record* is not a record instance.
        EngineError: the engine cannot evaluate the record's rules.
    """
    if not is_record(record):
        record_outcome(OUTCOME_INVALID_INPUT)
        raise InvalidInputKind(record)

    record_type = type(record)
    try:
        adapter = TypeAdapter(record_type)
        # Inputs are keyed by field name, so aliases never hide a value.
        adapter.validate_python(engine_input(adapter, record), by_alias=False, by_name=True)
    except ValidationError as e:
        return [FieldFailure.from_engine_error(err, record_type.__name__) for err in e.errors()]
    except (PydanticUserError, PydanticUndefinedAnnotation) as e:
        logger.error("Validation engine rejected %s: %s", record_type.__name__, e)
        record_outcome(OUTCOME_ENGINE_ERROR)
        raise EngineError(e) from e
    except Exception as e:
        # Validators raising anything but ValueError/AssertionError escape pydantic.
        logger.error("Validation engine crashed on %s: %r", record_type.__name__, e)
        record_outcome(OUTCOME_ENGINE_ERROR)
        raise EngineError(e) from e
    return []


def engine_input(adapter: TypeAdapter, record: Any) -> Any:
    """
    Plain data for re-validating *record*.

    Round-trip serialization turns validated values back into accepted
    input (``Json`` fields become strings again). Records the engine cannot
    serialize fall back to a field-by-field copy.
    """
    try:
        return adapter.dump_python(record, round_trip=True, warnings=False)
    except PydanticSerializationError as e:
        logger.debug("Cannot serialize %s, copying fields: %s", type(record).__name__, e)
        return to_engine_input(record)


def validate_record(record: Any) -> ValidationResult:
    """
    Validate *record* and keep the structured failures next to the messages.

    Args:
        record: A pydantic model, pydantic dataclass or dataclass instance.

    Returns:
        ValidationResult with valid flag, resolved messages and failures.

    Raises:
        InvalidInputKind: *record* is not a record instance.
        EngineError: the engine cannot evaluate the record's rules.
    """
    with timed_validation():
        failures = collect_failures(record)
        messages = [resolve_message(f, record) for f in failures]

    if failures:
        logger.debug("%s: %d rule violation(s)", type(record).__name__, len(failures))
        record_outcome(OUTCOME_INVALID)
    else:
        record_outcome(OUTCOME_VALID)

    return ValidationResult(valid=not failures, messages=messages, failures=failures)


def validate(record: Any) -> List[str]:
    """
    Validate *record* and return one display message per rule violation.

    An empty list means every rule passed. Rule violations never raise;
    only usage problems do.

    Raises:
        InvalidInputKind: *record* is not a record instance.
        EngineError: the engine cannot evaluate the record's rules.
    """
    return validate_record(record).messages
