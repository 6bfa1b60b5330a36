"""
JSON Schemas for the request runner.

VALIDATION_REQUEST_SCHEMA — the request document accepted by run_validation.py.
The record payload itself is opaque here: its rules belong to the record class.
"""

# =============================================================================
# Validation request ("module.path:ClassName" + raw field values)
# =============================================================================
VALIDATION_REQUEST_SCHEMA: dict = {
    "type": "object",
    "additionalProperties": False,
    "required": ["record_type", "record"],
    "properties": {
        "record_type": {
            "type": "string",
            "pattern": r"^[A-Za-z_][\w.]*:[A-Za-z_]\w*$",
            "description": "Import path of the record class, e.g. 'app.models:User'",
        },
        "record": {
            "type": "object",
            "description": "Field values; built without validation before the adapter runs",
        },
    },
}
