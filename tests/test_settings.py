"""
Tests for reading connection settings and building the API client.
"""
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from zabbix_resource import settings
from zabbix_resource.exceptions import RemoteCallFailed
from zabbix_resource.settings import Setting, ZabbixSettingNotFound
from zabbix_resource.zabbix import api as zapi


class TestLoadSettings:

    def test_missing_endpoint(self):
        assert settings.load_settings() is None

    def test_get_settings_raises_without_endpoint(self):
        with pytest.raises( ZabbixSettingNotFound ):
            settings.get_settings()

    def test_full(self, monkeypatch):
        monkeypatch.setenv( "ZABBIX_SERVER_URL", " https://zabbix.example.com " )
        monkeypatch.setenv( "ZABBIX_USER", "Admin" )
        monkeypatch.setenv( "ZABBIX_PASSWORD", "zabbix" )
        monkeypatch.setenv( "ZABBIX_TLS_INSECURE", "yes" )
        monkeypatch.setenv( "ZABBIX_TIMEOUT", "7.5" )
        monkeypatch.setenv( "ZABBIX_LEGACY_MAIN_FLAG", "1" )

        s = settings.get_settings()

        assert s.api_endpoint == "https://zabbix.example.com"
        assert s.user == "Admin"
        assert s.password == "zabbix"
        assert s.api_token == ""
        assert s.tls_insecure is True
        assert s.timeout == 7.5
        assert s.legacy_main_flag is True

    def test_empty_values_use_defaults(self, monkeypatch):
        monkeypatch.setenv( "ZABBIX_SERVER_URL", "https://zabbix.example.com" )
        monkeypatch.setenv( "ZABBIX_TIMEOUT", "" )
        monkeypatch.setenv( "ZABBIX_TLS_INSECURE", "" )

        s = settings.get_settings()
        assert s.timeout is None
        assert s.tls_insecure is False

    def test_invalid_timeout(self, monkeypatch):
        monkeypatch.setenv( "ZABBIX_SERVER_URL", "https://zabbix.example.com" )
        monkeypatch.setenv( "ZABBIX_TIMEOUT", "soon" )
        with pytest.raises( ValidationError ):
            settings.load_settings()

    def test_safe_returns_default(self, monkeypatch):
        assert settings.get_settings_safe( "fallback" ) == "fallback"

        monkeypatch.setenv( "ZABBIX_SERVER_URL", "https://zabbix.example.com" )
        monkeypatch.setenv( "ZABBIX_TIMEOUT", "x" )
        assert settings.get_settings_safe( None ) is None

    def test_keyword_construction(self):
        s = Setting( api_endpoint="https://zabbix.example.com", api_token="secret" )
        assert s.api_endpoint == "https://zabbix.example.com"
        assert s.api_token == "secret"


class TestAccessors:

    def test_defaults_without_environment(self):
        assert settings.get_legacy_main_flag() is False

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv( "ZABBIX_SERVER_URL", "https://zabbix.example.com" )
        monkeypatch.setenv( "ZABBIX_LEGACY_MAIN_FLAG", "TRUE" )
        assert settings.get_legacy_main_flag() is True

    def test_malformed_environment_uses_default(self, monkeypatch):
        monkeypatch.setenv( "ZABBIX_SERVER_URL", "https://zabbix.example.com" )
        monkeypatch.setenv( "ZABBIX_LEGACY_MAIN_FLAG", "maybe" )
        assert settings.get_legacy_main_flag() is False


class TestZabbixClient:

    @pytest.fixture
    def zabbix_api(self, monkeypatch):
        cls = MagicMock()
        monkeypatch.setattr( zapi, "ZabbixAPI", cls )
        return cls

    def test_token_login(self, zabbix_api):
        setting = Setting( api_endpoint="https://zabbix.example.com", api_token="secret", user="Admin", timeout=5.0 )

        z = zapi.get_zabbix_client( setting )

        zabbix_api.assert_called_once_with( "https://zabbix.example.com", timeout=5.0 )
        z.login.assert_called_once_with( api_token="secret" )

    def test_password_login(self, zabbix_api):
        setting = Setting( api_endpoint="https://zabbix.example.com", user="Admin", password="zabbix", tls_insecure=True )

        z = zapi.get_zabbix_client( setting )

        z.login.assert_called_once_with( user="Admin", password="zabbix" )
        assert z.session.verify is False

    def test_login_failure(self, zabbix_api):
        zabbix_api.return_value.login.side_effect = Exception( "Incorrect user name or password" )
        with pytest.raises( RemoteCallFailed ) as exc:
            zapi.get_zabbix_client( Setting( api_endpoint="https://zabbix.example.com" ) )
        assert exc.value.method == "user.login"

    def test_settings_from_environment(self, zabbix_api, monkeypatch):
        monkeypatch.setenv( "ZABBIX_SERVER_URL", "https://zabbix.example.com" )
        monkeypatch.setenv( "ZABBIX_API_TOKEN", "secret" )
        zapi.get_zabbix_client()
        zabbix_api.assert_called_once_with( "https://zabbix.example.com", timeout=None )

    def test_missing_settings(self, zabbix_api):
        with pytest.raises( ZabbixSettingNotFound ):
            zapi.get_zabbix_client()
        zabbix_api.assert_not_called()
