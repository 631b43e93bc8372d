from .selector import (
    SecretKeySelectorSchema,
    ConfigMapKeySelectorSchema,
    SecretOrConfigMapSchema,
)
from .web_tls import WebTLSConfigSchema, WebSpecSchema

__all__ = [
    "SecretKeySelectorSchema",
    "ConfigMapKeySelectorSchema",
    "SecretOrConfigMapSchema",
    "WebTLSConfigSchema",
    "WebSpecSchema",
]
