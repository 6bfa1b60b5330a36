"""
Unit tests for message resolution.
Tests: resolve_message, message_field, FieldFailure, default_message.
"""
from src.config.constants import UNKNOWN_FIELD_MESSAGE
from src.models.field_failure import FieldFailure, default_message
from src.record_validation.messages import message_field, resolve_message


def _failure(loc, rule="string_too_short", record_name="User"):
    return FieldFailure.from_engine_error(
        {"loc": loc, "type": rule, "msg": "String should have at least 1 character"},
        record_name,
    )


# =============================================================================
# FieldFailure
# =============================================================================

class TestFieldFailure:
    def test_top_level_field(self):
        failure = _failure(("name",))
        assert failure.field == "name"
        assert failure.field_name == "name"
        assert failure.rule == "string_too_short"
        assert failure.message == "Field validation for 'name' failed on the 'string_too_short' tag"

    def test_nested_location_is_dotted(self):
        failure = _failure(("items", 0, "sku"))
        assert failure.field == "items.0.sku"
        assert failure.field_name == "items"

    def test_record_level_uses_record_name(self):
        failure = _failure((), rule="value_error", record_name="DateRange")
        assert failure.field == "DateRange"
        assert failure.field_name == ""

    def test_default_message_format(self):
        assert default_message("Name", "required") == (
            "Field validation for 'Name' failed on the 'required' tag"
        )


# =============================================================================
# resolve_message
# =============================================================================

class TestResolveMessage:
    def test_custom_message(self, blank_name_user):
        assert resolve_message(_failure(("name",)), blank_name_user) == "name is required"

    def test_default_message(self, blank_name_user):
        failure = _failure(("email",))
        assert resolve_message(failure, blank_name_user) == failure.message

    def test_unknown_field_sentinel(self, blank_name_user):
        assert resolve_message(_failure(("nickname",)), blank_name_user) == UNKNOWN_FIELD_MESSAGE

    def test_mismatched_record_gives_unknown_field(self, records):
        # failure from a Customer, resolved against an unrelated record
        failure = _failure(("address", "city"), record_name="Customer")
        assert resolve_message(failure, records.Signup(email="ada@example.it")) == "Unknown field"

    def test_accepts_record_type(self, records):
        assert resolve_message(_failure(("name",)), records.User) == "name is required"

    def test_nested_custom_message(self, customer_with_blank_city):
        failure = _failure(("address", "city"), record_name="Customer")
        assert resolve_message(failure, customer_with_blank_city) == "city is required"

    def test_outer_overrides_inner(self, records):
        failure = _failure(("address", "city"), record_name="LabelledCustomer")
        assert resolve_message(failure, records.LabelledCustomer) == "address is invalid"

    def test_unknown_nested_segment_falls_back_to_default(self, records):
        failure = _failure(("address", "country"), record_name="Customer")
        assert resolve_message(failure, records.Customer) == failure.message

    def test_record_level_failure_uses_default(self, records):
        failure = _failure((), rule="value_error", record_name="DateRange")
        assert resolve_message(failure, records.DateRange) == failure.message

    def test_alias_lookup(self, records):
        assert resolve_message(_failure(("accountId",)), records.Account) == "account id is required"

    def test_custom_message_not_interpolated(self, records):
        failure = _failure(("items", 3, "sku"), record_name="Order")
        assert resolve_message(failure, records.Order) == "sku is required"


# =============================================================================
# message_field
# =============================================================================

class TestMessageField:
    def test_stores_message_under_key(self, records):
        info = records.User.model_fields["name"]
        assert info.json_schema_extra == {"errormessage": "name is required"}
        assert info.is_required()

    def test_keeps_rules(self, records):
        info = records.Address.model_fields["city"]
        assert any(getattr(m, "min_length", None) == 1 for m in info.metadata)

    def test_merges_existing_schema_extra(self):
        info = message_field("bad", json_schema_extra={"example": "x"}, default="")
        assert info.json_schema_extra == {"example": "x", "errormessage": "bad"}
        assert info.default == ""
