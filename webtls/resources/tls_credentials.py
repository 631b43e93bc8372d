import logging
from logging import Logger
from typing import List, Optional, Tuple
from kubernetes_asyncio.client import (
    V1Volume,
    V1VolumeMount,
    V1SecretVolumeSource,
    V1ConfigMapVolumeSource,
)
from webtls.resources.assets import resolve
from webtls.types.models.selector import CredentialSelector, SelectorKind, UNSET
from webtls.types.models.web_tls import WebTLSConfig
from webtls.utils.errors import MissingTLSKeyError

VOLUME_PREFIX = "web-config-tls-"

ROLE_KEY = "key"
ROLE_CERT = "cert"
ROLE_CLIENT_CA = "client-ca"

Mount = Tuple[V1Volume, V1VolumeMount]


def volume_name_prefix(role: str, kind: SelectorKind) -> str:
    """Volume name prefix of a credential, e.g. `web-config-tls-secret-cert-`."""
    return f"{VOLUME_PREFIX}{kind.value}-{role}-"


def plan_mount(
    selector: CredentialSelector, name_prefix: str, target_path: str
) -> Optional[Mount]:
    """Build a volume exposing the whole Secret or ConfigMap and a read-only
    mount projecting the selected key onto `target_path`.

    Returns None when the selector is unset.
    """
    if not selector.is_set:
        return None

    volume_name = name_prefix + selector.name
    if selector.kind is SelectorKind.SECRET:
        volume = V1Volume(
            name=volume_name,
            secret=V1SecretVolumeSource(secret_name=selector.name),
        )
    else:
        volume = V1Volume(
            name=volume_name,
            config_map=V1ConfigMapVolumeSource(name=selector.name),
        )
    mount = V1VolumeMount(
        name=volume_name,
        read_only=True,
        mount_path=target_path,
        sub_path=selector.key,
    )
    return volume, mount


def plan_all(
    key_secret: CredentialSelector,
    cert: CredentialSelector,
    client_ca: CredentialSelector,
    mount_path: str,
) -> Tuple[List[V1Volume], List[V1VolumeMount]]:
    """Plan the key, certificate and client CA mounts, in that order."""
    if not key_secret.is_set:
        raise MissingTLSKeyError()

    volumes, mounts = [], []
    for role, selector in (
        (ROLE_KEY, key_secret),
        (ROLE_CERT, cert),
        (ROLE_CLIENT_CA, client_ca),
    ):
        if not selector.is_set:
            continue
        volume, mount = plan_mount(
            selector,
            volume_name_prefix(role, selector.kind),
            resolve(selector, mount_path),
        )
        volumes.append(volume)
        mounts.append(mount)
    return volumes, mounts


class TLSCredentials:
    """TLS key, certificate and client CA of a web endpoint."""

    # directory where the credentials are mounted
    mount_path: str

    key_secret: CredentialSelector
    cert: CredentialSelector
    client_ca: CredentialSelector

    logger: Logger

    def __init__(
        self,
        mount_path: str,
        key_secret: CredentialSelector,
        cert: CredentialSelector = UNSET,
        client_ca: CredentialSelector = UNSET,
        logger: Logger = None,
    ):
        if key_secret is None or not key_secret.is_set:
            raise MissingTLSKeyError()
        self.mount_path = mount_path
        self.key_secret = key_secret
        self.cert = cert if cert is not None else UNSET
        self.client_ca = client_ca if client_ca is not None else UNSET
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def from_spec(
        cls, mount_path: str, tls: WebTLSConfig, logger: Logger = None
    ) -> "TLSCredentials":
        return cls(
            mount_path,
            tls.key_secret,
            cert=tls.cert,
            client_ca=tls.client_ca,
            logger=logger,
        )

    def get_key_mount_path(self) -> str:
        """Path of the TLS key inside the container."""
        return resolve(self.key_secret, self.mount_path)

    def get_cert_mount_path(self) -> str:
        """Path of the TLS certificate inside the container, empty if unset."""
        return resolve(self.cert, self.mount_path)

    def get_ca_mount_path(self) -> str:
        """Path of the client CA certificate inside the container, empty if unset."""
        return resolve(self.client_ca, self.mount_path)

    def mount(self) -> Tuple[List[V1Volume], List[V1VolumeMount]]:
        """Create volumes and volume mounts referencing the TLS credentials."""
        volumes, mounts = plan_all(
            self.key_secret, self.cert, self.client_ca, self.mount_path
        )
        self.logger.debug(
            "Planned %d TLS credential mounts under %s", len(mounts), self.mount_path
        )
        return volumes, mounts
