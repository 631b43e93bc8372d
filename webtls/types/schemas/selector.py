from typing import Any
from marshmallow import fields, post_load, validates_schema, ValidationError
from webtls.types.base import BaseSchema, EXCLUDE, JSON
from webtls.types.models.selector import (
    CredentialSelector,
    SecretSelector,
    ConfigMapSelector,
    UNSET,
)


class SecretKeySelectorSchema(BaseSchema):
    """Schema for Secret Key Selector."""

    __model__ = SecretSelector

    class Meta(BaseSchema.Meta):
        unknown = EXCLUDE

    name = fields.Str(
        data_key="name",
        required=True,
        allow_none=False,
    )
    key = fields.Str(
        data_key="key",
        required=True,
        allow_none=False,
    )


class ConfigMapKeySelectorSchema(SecretKeySelectorSchema):
    """Schema for ConfigMap Key Selector."""

    __model__ = ConfigMapSelector


class SecretOrConfigMapSchema(BaseSchema):
    """Schema for a credential held in either a Secret or a ConfigMap."""

    class Meta(BaseSchema.Meta):
        unknown = EXCLUDE

    secret = fields.Nested(
        SecretKeySelectorSchema(),
        data_key="secret",
        allow_none=True,
        load_default=None,
    )
    config_map = fields.Nested(
        ConfigMapKeySelectorSchema(),
        data_key="configMap",
        allow_none=True,
        load_default=None,
    )

    @validates_schema
    def validate_single_source(self, data: JSON, **kwargs: Any) -> None:
        if data.get("secret") is not None and data.get("config_map") is not None:
            raise ValidationError(
                "Only one of secret or configMap can be specified."
            )

    @post_load
    def make_object(self, data: JSON, **kwargs: Any) -> CredentialSelector:
        """Collapse the two optional references into a single selector."""
        if data.get("secret") is not None:
            return data["secret"]
        if data.get("config_map") is not None:
            return data["config_map"]
        return UNSET
