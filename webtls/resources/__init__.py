from .assets import asset_key, resolve
from .tls_credentials import (
    TLSCredentials,
    plan_mount,
    plan_all,
    volume_name_prefix,
)
from .web_config import WebConfig, dump_config

__all__ = [
    "asset_key",
    "resolve",
    "TLSCredentials",
    "plan_mount",
    "plan_all",
    "volume_name_prefix",
    "WebConfig",
    "dump_config",
]
