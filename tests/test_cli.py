"""
Tests for the zabbix-host command line.
"""
import json

import pytest

from zabbix_resource import cli
from zabbix_resource.resource import HostResource


@pytest.fixture
def resource(z, monkeypatch):
    """Route the CLI to a HostResource bound to the mock handle."""
    monkeypatch.setenv( "ZABBIX_SERVER_URL", "https://zabbix.example.com" )
    monkeypatch.setattr( HostResource, "from_settings", classmethod( lambda cls, setting: cls( z, legacy_main_flag=False ) ) )

    z.hostgroup.get.return_value = [ { "groupid": "7", "name": "Linux servers" } ]
    z.template.get.return_value = []
    z.host.create.return_value = { "hostids": [ "10055" ] }
    z.host.get.return_value = [ { "hostid": "10055", "host": "srv1", "name": "srv1", "status": "0", "macros": [], "interfaces": [] } ]
    return z


@pytest.fixture
def host_file(tmp_path, host_config):
    path = tmp_path / "host.json"
    path.write_text( json.dumps( host_config ) )
    return str( path )


def test_create(resource, host_file, capsys):
    assert cli.main( [ "create", host_file ] ) == 0
    resource.host.create.assert_called_once()
    assert "10055" in capsys.readouterr().out


def test_read_without_file(resource, capsys):
    assert cli.main( [ "read", "10055" ] ) == 0
    assert "srv1" in capsys.readouterr().out


def test_update(resource, host_file):
    assert cli.main( [ "update", "10055", host_file ] ) == 0
    assert resource.host.update.call_args.kwargs["hostid"] == "10055"


def test_delete(resource):
    assert cli.main( [ "delete", "10055" ] ) == 0
    resource.host.delete.assert_called_once_with( "10055" )


def test_check(resource, capsys):
    resource.apiinfo.version.return_value = "7.0.0"
    assert cli.main( [ "check" ] ) == 0
    assert "7.0.0" in capsys.readouterr().out


def test_error_exit_status(resource, host_file, capsys):
    resource.hostgroup.get.return_value = []
    assert cli.main( [ "create", host_file ] ) == 1
    assert "Linux servers" in capsys.readouterr().out


def test_missing_settings(monkeypatch, capsys):
    assert cli.main( [ "delete", "10055" ] ) == 1
    assert "Missing Zabbix Configuration" in capsys.readouterr().out


def test_missing_file(resource, tmp_path):
    assert cli.main( [ "create", str( tmp_path / "nope.json" ) ] ) == 1
