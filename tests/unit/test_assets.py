"""Unit tests for credential asset paths."""

import pytest
from webtls.resources.assets import asset_key, resolve
from webtls.types.models.selector import (
    SecretSelector,
    ConfigMapSelector,
    UNSET,
)


class TestAssetKey:
    """Tests for asset_key()."""

    def test_secret(self):
        assert asset_key(SecretSelector("tls", "tls.crt")) == "secret__tls_tls.crt"

    def test_configmap(self):
        assert (
            asset_key(ConfigMapSelector("tls", "tls.crt"))
            == "configmap__tls_tls.crt"
        )

    def test_namespace(self):
        key = asset_key(SecretSelector("tls", "tls.key"), namespace="monitoring")
        assert key == "secret_monitoring_tls_tls.key"

    def test_unset_is_empty(self):
        assert asset_key(UNSET) == ""
        assert asset_key(UNSET, namespace="monitoring") == ""


class TestResolve:
    """Tests for resolve()."""

    def test_unset_is_empty(self):
        assert resolve(UNSET, "/etc/certs") == ""

    def test_secret_path(self):
        path = resolve(SecretSelector("test-secret", "tls.crt"), "/web_certs_path_prefix")
        assert path == "/web_certs_path_prefix/secret__test-secret_tls.crt"

    def test_configmap_path(self):
        path = resolve(ConfigMapSelector("test-configmap", "tls.crt"), "/certs")
        assert path == "/certs/configmap__test-configmap_tls.crt"

    @pytest.mark.parametrize("prefix", ["/certs/", "/certs//", "/certs"])
    def test_single_separator(self, prefix):
        path = resolve(SecretSelector("s", "k"), prefix)
        assert path == "/certs/secret__s_k"

    def test_relative_prefix(self):
        assert resolve(SecretSelector("s", "k"), "certs") == "certs/secret__s_k"

    def test_idempotent(self):
        selector = SecretSelector("s", "tls.key")
        assert resolve(selector, "/p") == resolve(selector, "/p")

    def test_secret_and_configmap_do_not_collide(self):
        assert resolve(SecretSelector("same", "tls.crt"), "/p") != resolve(
            ConfigMapSelector("same", "tls.crt"), "/p"
        )

    def test_empty_name_and_key(self):
        assert resolve(SecretSelector("", ""), "/p") == "/p/secret___"

    def test_double_leading_slash(self):
        assert resolve(SecretSelector("s", "k"), "//certs") == "/certs/secret__s_k"

    def test_many_leading_slashes(self):
        assert resolve(SecretSelector("s", "k"), "///certs/") == "/certs/secret__s_k"
