"""Pytest configuration and shared fixtures."""

from unittest.mock import MagicMock

import pytest

from zabbix_resource.models import HostSpec


ENV_VARS = [
    "ZABBIX_SERVER_URL",
    "ZABBIX_USER",
    "ZABBIX_PASSWORD",
    "ZABBIX_API_TOKEN",
    "ZABBIX_TLS_INSECURE",
    "ZABBIX_TIMEOUT",
    "ZABBIX_LEGACY_MAIN_FLAG",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Run every test without ZABBIX_* variables from the real environment."""
    for name in ENV_VARS:
        monkeypatch.delenv( name, raising=False )


@pytest.fixture
def z():
    """A stand-in for an authenticated pyzabbix.ZabbixAPI handle."""
    return MagicMock()


@pytest.fixture
def host_config():
    return {
        "host": "srv1",
        "monitored": True,
        "interfaces": [ { "ip": "10.0.0.1", "main": True, "type": "agent" } ],
        "groups": [ "Linux servers" ],
        "templates": [],
        "macro": { "SITE": "eu" },
    }


@pytest.fixture
def host_spec(host_config):
    return HostSpec.from_config( host_config )
