import pytest

from asset_manager.exceptions import ValidationError
from asset_manager.services.common.schemas import AddressField, AMSchema


@pytest.fixture
def test_schema():
    """Minimal schema to test the :class:`AMSchema` and :class:`AddressField` classes.

    Defines a required and an optional :class:`AddressField`.
    """

    class TestSchema(AMSchema):
        required_address = AddressField(required=True)
        optional_address = AddressField(load_default="")

    return TestSchema()


@pytest.mark.parametrize(
    "input_dict, failure_expected",
    argvalues=[
        ({"required_address": "VALID"}, False),
        ({"required_address": "VALID", "optional_address": ""}, False),
        ({"required_address": "VALID", "optional_address": "VALID"}, False),
        ({"required_address": ""}, True),
        ({"required_address": "NOT-AN-ADDRESS"}, True),
        ({"required_address": "VALID", "optional_address": "NOT-AN-ADDRESS"}, True),
        ({}, True),
    ],
    ids=[
        "Valid address passes",
        "Empty optional address passes",
        "Valid optional address passes",
        "Empty required address fails",
        "Malformed address fails",
        "Malformed optional address fails",
        "Missing required address fails",
    ],
)
def test_amschema_validate_and_deserialize_raises_validation_error_when_expected(
    input_dict, failure_expected, test_schema, signing_address
):
    input_dict = {k: signing_address if v == "VALID" else v for k, v in input_dict.items()}
    try:
        test_schema.validate_and_deserialize(input_dict)
    except ValidationError:
        if failure_expected:
            return
        raise AssertionError(f"RAISED {ValidationError} unexpectedly!")
    assert not failure_expected, "Expected a ValidationError!"


def test_addressfield_deserializes_empty_optional_address_to_empty_string(test_schema, signing_address):
    loaded = test_schema.validate_and_deserialize({"required_address": signing_address})
    assert loaded == {"required_address": signing_address, "optional_address": ""}
