from enum import Enum
from typing import Optional
from webtls.types.base import BaseModel


class SelectorKind(Enum):
    SECRET = "secret"
    CONFIG_MAP = "configmap"


class CredentialSelector(BaseModel):
    """Reference to a TLS credential stored in a Secret or a ConfigMap.

    Use one of the concrete variants: `SecretSelector`, `ConfigMapSelector`
    or `UnsetSelector` (the `UNSET` constant).
    """

    kind: Optional[SelectorKind] = None
    name: str
    key: str

    @property
    def is_set(self) -> bool:
        return self.kind is not None


class SecretSelector(CredentialSelector):
    """Selects a key of a Secret."""

    kind = SelectorKind.SECRET

    def __init__(self, name: str, key: str) -> None:
        super().__init__(name=name, key=key)


class ConfigMapSelector(CredentialSelector):
    """Selects a key of a ConfigMap."""

    kind = SelectorKind.CONFIG_MAP

    def __init__(self, name: str, key: str) -> None:
        super().__init__(name=name, key=key)


class UnsetSelector(CredentialSelector):
    """No credential configured."""

    def __init__(self) -> None:
        super().__init__()

    def __repr__(self) -> str:
        return "UnsetSelector()"


UNSET = UnsetSelector()
