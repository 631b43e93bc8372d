from .selector import (
    SelectorKind,
    CredentialSelector,
    SecretSelector,
    ConfigMapSelector,
    UnsetSelector,
    UNSET,
)
from .web_tls import WebTLSConfig, WebSpec
from .web_config_resources import WebConfigResources

__all__ = [
    "SelectorKind",
    "CredentialSelector",
    "SecretSelector",
    "ConfigMapSelector",
    "UnsetSelector",
    "UNSET",
    "WebTLSConfig",
    "WebSpec",
    "WebConfigResources",
]
