from algosdk import encoding
from flask_marshmallow.schema import Schema
from marshmallow.fields import String

from asset_manager.exceptions import ValidationError


class AMSchema(Schema):
    """A :class:`flask_marshmallow.Schema` with a convenience method for
    validation and deserialization.
    """

    def validate_and_deserialize(self, data_obj) -> dict:
        """Validate `data_obj` and deserialize its fields to native python objects.

        :raises asset_manager.exceptions.ValidationError:
            if validating the `data_obj` did not succeed. The service's error
            handler turns this into a `400 Bad Request`.
        """
        if data_obj is None:
            raise ValidationError({"_schema": ["Request body must be a JSON object."]})
        errors = self.validate(data_obj)
        if errors:
            raise ValidationError(errors)
        return self.load(data_obj)


class AddressField(String):
    """A field for Algorand addresses given as base32 :class:`str` values.

    Empty strings are allowed unless the field is required; they stand for
    "no address".
    """

    default_error_messages = {
        "invalid_address": "Must be a valid Algorand address!",
        "empty": "Must not be empty!",
    }

    def _deserialize(self, value, attr, data, **kwargs) -> str:
        deserialized = super(AddressField, self)._deserialize(value, attr, data, **kwargs)
        if not deserialized:
            if self.required:
                raise self.make_error("empty")
            return ""
        if not encoding.is_valid_address(deserialized):
            raise self.make_error("invalid_address")
        return deserialized
