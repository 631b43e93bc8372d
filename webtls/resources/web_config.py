import logging
import yaml
from collections import OrderedDict
from logging import Logger
from typing import Optional, Tuple
from kubernetes_asyncio.client import (
    V1Volume,
    V1VolumeMount,
    V1SecretVolumeSource,
)
from webtls.types.settings import Settings
from webtls.types.models.web_tls import WebTLSConfig
from webtls.types.models.web_config_resources import WebConfigResources
from webtls.resources.tls_credentials import TLSCredentials
from webtls.utils.errors import WebConfigSerializationError


class WebConfigDumper(yaml.SafeDumper):
    """SafeDumper that writes OrderedDict keys in insertion order."""


def _represent_ordered_dict(dumper: yaml.SafeDumper, data: OrderedDict):
    # a list of pairs is never sorted by the representer
    return dumper.represent_mapping("tag:yaml.org,2002:map", list(data.items()))


WebConfigDumper.add_representer(OrderedDict, _represent_ordered_dict)


def dump_config(document: OrderedDict) -> bytes:
    """Serialize a web config document to UTF-8 encoded YAML."""
    try:
        return yaml.dump(
            document,
            Dumper=WebConfigDumper,
            default_flow_style=False,
            allow_unicode=True,
            encoding="utf-8",
        )
    except yaml.YAMLError as ex:
        raise WebConfigSerializationError(
            f"Failed to serialize web config: {ex}"
        ) from ex


class WebConfig:
    """Web configuration file of a monitored process.

    The file format is described in the Prometheus documentation:
    https://prometheus.io/docs/prometheus/latest/configuration/https/
    """

    ARG_TEMPLATE = "--web.config.file={}"

    secret_name: str
    settings: Settings
    logger: Logger

    def __init__(
        self, secret_name: str, settings: Settings = None, logger: Logger = None
    ):
        self.secret_name = secret_name
        self.settings = settings or Settings()
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def from_spec(
        cls, name: str, settings: Settings = None, logger: Logger = None
    ) -> "WebConfig":
        return cls(WebConfigResources.secret_name(name), settings, logger)

    def generate_config_file_contents(
        self, assets_path_prefix: str = None, tls: Optional[WebTLSConfig] = None
    ) -> bytes:
        """Render the web config file with TLS credentials mounted under
        `assets_path_prefix`."""
        if assets_path_prefix is None:
            assets_path_prefix = self.settings.tls_assets_dir
        document = OrderedDict()
        if tls is not None:
            document["tls_server_config"] = self.prepare_tls_server_config(
                assets_path_prefix, tls
            )
        contents = dump_config(document)
        self.logger.debug(
            "Generated web config for secret %s (%d bytes)",
            self.secret_name,
            len(contents),
        )
        return contents

    def prepare_tls_server_config(
        self, assets_path_prefix: str, tls: WebTLSConfig
    ) -> OrderedDict:
        assets = TLSCredentials.from_spec(assets_path_prefix, tls, logger=self.logger)
        config = OrderedDict()

        cert_path = assets.get_cert_mount_path()
        if cert_path:
            config["cert_file"] = cert_path

        config["key_file"] = assets.get_key_mount_path()

        if tls.client_auth_type:
            config["client_auth_type"] = tls.client_auth_type

        ca_path = assets.get_ca_mount_path()
        if ca_path:
            config["client_ca_file"] = ca_path

        if tls.min_version:
            config["min_version"] = tls.min_version

        if tls.max_version:
            config["max_version"] = tls.max_version

        if tls.cipher_suites:
            config["cipher_suites"] = list(tls.cipher_suites)

        if tls.prefer_server_cipher_suites is not None:
            config["prefer_server_cipher_suites"] = tls.prefer_server_cipher_suites

        if tls.curve_preferences:
            config["curve_preferences"] = list(tls.curve_preferences)

        return config

    def mount(
        self, destination_path: str = None
    ) -> Tuple[str, V1Volume, V1VolumeMount]:
        """Create a volume and a volume mount exposing the config file at
        `destination_path`, together with the command line argument
        pointing the process at it."""
        if destination_path is None:
            destination_path = self.settings.web_config_file_path
        return (
            self.prepare_arg(destination_path),
            self.prepare_volume(),
            self.prepare_volume_mount(destination_path),
        )

    def prepare_arg(self, file_path: str) -> str:
        return self.ARG_TEMPLATE.format(file_path)

    def prepare_volume(self) -> V1Volume:
        return V1Volume(
            name=WebConfigResources.volume_name(),
            secret=V1SecretVolumeSource(secret_name=self.secret_name),
        )

    def prepare_volume_mount(self, file_path: str) -> V1VolumeMount:
        return V1VolumeMount(
            name=WebConfigResources.volume_name(),
            sub_path=WebConfigResources.config_file_key(),
            read_only=True,
            mount_path=file_path,
        )
