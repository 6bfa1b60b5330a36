"""
Constants used across the validation adapter.
Pinned so messages stay stable between releases.
"""

# =============================================================================
# Message resolution
# =============================================================================
UNKNOWN_FIELD_MESSAGE: str = "Unknown field"

DEFAULT_MESSAGE_TEMPLATE: str = "Field validation for '{field}' failed on the '{rule}' tag"

# =============================================================================
# Metric label values
# =============================================================================
OUTCOME_VALID: str = "valid"
OUTCOME_INVALID: str = "invalid"
OUTCOME_INVALID_INPUT: str = "invalid_input"
OUTCOME_ENGINE_ERROR: str = "engine_error"

SOURCE_CUSTOM: str = "custom"
SOURCE_DEFAULT: str = "default"
SOURCE_UNKNOWN_FIELD: str = "unknown_field"

# =============================================================================
# Runner exit codes
# =============================================================================
EXIT_VALID: int = 0
EXIT_INVALID: int = 1
EXIT_USAGE_ERROR: int = 2
