from typing import List, Optional
from webtls.types.base import BaseModel
from webtls.types.models.selector import CredentialSelector, UNSET


class WebTLSConfig(BaseModel):
    """TLS settings of a web endpoint."""

    key_secret: CredentialSelector
    cert: CredentialSelector
    client_ca: CredentialSelector
    client_auth_type: Optional[str]
    min_version: Optional[str]
    max_version: Optional[str]
    cipher_suites: List[str]
    # None means unset, which is different from False
    prefer_server_cipher_suites: Optional[bool]
    curve_preferences: List[str]

    def __init__(
        self,
        *,
        key_secret: CredentialSelector = UNSET,
        cert: CredentialSelector = UNSET,
        client_ca: CredentialSelector = UNSET,
        client_auth_type: Optional[str] = None,
        min_version: Optional[str] = None,
        max_version: Optional[str] = None,
        cipher_suites: List[str] = None,
        prefer_server_cipher_suites: Optional[bool] = None,
        curve_preferences: List[str] = None,
    ) -> None:
        super().__init__(
            key_secret=key_secret if key_secret is not None else UNSET,
            cert=cert if cert is not None else UNSET,
            client_ca=client_ca if client_ca is not None else UNSET,
            client_auth_type=client_auth_type,
            min_version=min_version,
            max_version=max_version,
            cipher_suites=list(cipher_suites or []),
            prefer_server_cipher_suites=prefer_server_cipher_suites,
            curve_preferences=list(curve_preferences or []),
        )


class WebSpec(BaseModel):
    """Web endpoint settings of a monitored process."""

    tls_config: Optional[WebTLSConfig]
