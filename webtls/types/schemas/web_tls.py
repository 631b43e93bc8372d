from marshmallow import fields
from webtls.types.base import BaseSchema, EXCLUDE
from webtls.types.models.selector import UNSET
from webtls.types.models.web_tls import WebTLSConfig, WebSpec
from webtls.types.schemas.selector import (
    SecretKeySelectorSchema,
    SecretOrConfigMapSchema,
)


class WebTLSConfigSchema(BaseSchema):
    """Schema for web endpoint TLS settings."""

    __model__ = WebTLSConfig

    class Meta(BaseSchema.Meta):
        unknown = EXCLUDE

    key_secret = fields.Nested(
        SecretKeySelectorSchema(),
        data_key="keySecret",
        required=True,
    )
    cert = fields.Nested(
        SecretOrConfigMapSchema(),
        data_key="cert",
        allow_none=True,
        load_default=UNSET,
    )
    client_ca = fields.Nested(
        SecretOrConfigMapSchema(),
        data_key="clientCA",
        allow_none=True,
        load_default=UNSET,
    )
    client_auth_type = fields.Str(
        data_key="clientAuthType", allow_none=True, load_default=None
    )
    min_version = fields.Str(data_key="minVersion", allow_none=True, load_default=None)
    max_version = fields.Str(data_key="maxVersion", allow_none=True, load_default=None)
    cipher_suites = fields.List(
        fields.Str(),
        data_key="cipherSuites",
        allow_none=True,
        load_default=list,
    )
    prefer_server_cipher_suites = fields.Bool(
        data_key="preferServerCipherSuites",
        allow_none=True,
        load_default=None,
    )
    curve_preferences = fields.List(
        fields.Str(),
        data_key="curvePreferences",
        allow_none=True,
        load_default=list,
    )


class WebSpecSchema(BaseSchema):
    """Schema for the web section of a monitored process spec."""

    __model__ = WebSpec

    class Meta(BaseSchema.Meta):
        unknown = EXCLUDE

    tls_config = fields.Nested(
        WebTLSConfigSchema(),
        data_key="tlsConfig",
        allow_none=True,
        load_default=None,
    )
