import os
import posixpath
from typing import Any

_TRUE, _FALSE = {"True", "true", "yes", "1"}, {"False", "false", "no", "0"}


def _getenv(name: str, *default: Any) -> Any:
    try:
        v = os.environ[name]
        if v in _TRUE:
            return True
        elif v in _FALSE:
            return False
        else:
            return v
    except KeyError:
        pass
    if default:
        return default[0]
    raise KeyError(name)


# ------------------------------------------------
# ---- Defaults and environment variables ----
# ------------------------------------------------

#: Directory inside the container holding the rendered web config file
WEB_CONFIG_DIR = str(_getenv("WEB_CONFIG_DIR", "/etc/prometheus/web_config"))

#: File name of the rendered web config inside the container
WEB_CONFIG_FILE_NAME = str(_getenv("WEB_CONFIG_FILE_NAME", "web-config.yaml"))

#: Directory inside the container where TLS keys and certificates are mounted
TLS_ASSETS_DIR = str(_getenv("TLS_ASSETS_DIR", "/etc/prometheus/web_config/certs"))


class Settings:
    """Web TLS settings"""

    web_config_dir: str = WEB_CONFIG_DIR
    web_config_file_name: str = WEB_CONFIG_FILE_NAME
    tls_assets_dir: str = TLS_ASSETS_DIR

    def __init__(
        self,
        *args,
        web_config_dir: str = None,
        web_config_file_name: str = None,
        tls_assets_dir: str = None,
        **kwargs,
    ):
        if web_config_dir is not None:
            self.web_config_dir = web_config_dir

        if web_config_file_name is not None:
            self.web_config_file_name = web_config_file_name

        if tls_assets_dir is not None:
            self.tls_assets_dir = tls_assets_dir

    @property
    def web_config_file_path(self) -> str:
        """Absolute path of the web config file inside the container."""
        return posixpath.join(self.web_config_dir, self.web_config_file_name)
