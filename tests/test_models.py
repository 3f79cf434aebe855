"""
Tests for option models — ConfigValue states and ResolvedOptions.
"""

import pytest
from pydantic import ValidationError

from proxyopts.core.models.options import ConfigValue, PackageManagerKind, ResolvedOptions


class TestPackageManagerKind:
    def test_cli_names(self):
        assert PackageManagerKind.DEFAULT.cli == "npm"
        assert PackageManagerKind.ALTERNATE.cli == "yarn"

    def test_quoting(self):
        assert PackageManagerKind.ALTERNATE.quotes_strings
        assert not PackageManagerKind.DEFAULT.quotes_strings


class TestConfigValue:
    def test_set(self):
        v = ConfigValue.set_("proxy", "http://p")
        assert v.ok and v.present
        assert v.value == "http://p"

    def test_unset(self):
        v = ConfigValue.unset("proxy")
        assert v.ok
        assert not v.present

    def test_unavailable(self):
        v = ConfigValue.unavailable("proxy", "npm: not found")
        assert not v.ok
        assert not v.present
        assert v.error == "npm: not found"


class TestResolvedOptions:
    def test_defaults(self):
        opts = ResolvedOptions()
        assert opts.proxy is None
        assert opts.no_proxy == []
        assert opts.strict_ssl is False
        assert opts.ca is None

    def test_accepts_wire_names(self):
        opts = ResolvedOptions.model_validate({"noProxy": ["a"], "strictSSL": True})
        assert opts.no_proxy == ["a"]
        assert opts.strict_ssl is True

    def test_to_dict_uses_wire_names(self):
        d = ResolvedOptions(proxy="http://p", no_proxy=["x"], ca=["c"]).to_dict()
        assert d == {
            "proxy": "http://p",
            "noProxy": ["x"],
            "strictSSL": False,
            "cert": None,
            "ca": ["c"],
        }

    def test_frozen(self):
        opts = ResolvedOptions()
        with pytest.raises(ValidationError):
            opts.proxy = "http://other"

    def test_to_env(self):
        env = ResolvedOptions(proxy="http://p:1", no_proxy=["a", "b"]).to_env()
        assert env == {
            "HTTPS_PROXY": "http://p:1",
            "HTTP_PROXY": "http://p:1",
            "NO_PROXY": "a,b",
        }

    def test_to_env_empty(self):
        assert ResolvedOptions().to_env() == {}
