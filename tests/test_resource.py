"""
Tests for the resource schema, replacement decisions and HostResource.
"""
import copy

from zabbix_resource.models import InterfaceSpec
from zabbix_resource.resource import HOST_SCHEMA, INTERFACE_SCHEMA, HostResource, requires_replacement
from zabbix_resource.settings import Setting


class TestSchema:

    def test_interfaces_force_new(self):
        assert HOST_SCHEMA["interfaces"].force_new
        assert all( f.force_new for f in INTERFACE_SCHEMA.values() )

    def test_updatable_fields(self):
        for key in ( "host", "name", "monitored", "groups", "templates", "macro" ):
            assert not HOST_SCHEMA[key].force_new

    def test_defaults(self):
        assert HOST_SCHEMA["monitored"].default is True
        assert INTERFACE_SCHEMA["port"].default == "10050"
        assert INTERFACE_SCHEMA["type"].default == "agent"
        assert HOST_SCHEMA["templates"].optional
        assert HOST_SCHEMA["host_id"].computed


class TestRequiresReplacement:

    def test_same_interfaces(self, host_spec):
        new = copy.deepcopy( host_spec )
        new.name = "Server 1"
        new.groups = { "Web" }
        new.macro = {}
        assert requires_replacement( host_spec, new ) is False

    def test_computed_interface_id_is_ignored(self, host_spec):
        new = copy.deepcopy( host_spec )
        new.interfaces[0].interface_id = "31"
        assert requires_replacement( host_spec, new ) is False

    def test_changed_interface(self, host_spec):
        new = copy.deepcopy( host_spec )
        new.interfaces[0].port = "10051"
        assert requires_replacement( host_spec, new ) is True

    def test_added_interface(self, host_spec):
        new = copy.deepcopy( host_spec )
        new.interfaces.append( InterfaceSpec( main=False, ip="10.0.0.2" ) )
        assert requires_replacement( host_spec, new ) is True

    def test_different_host_id(self, host_spec):
        old = copy.deepcopy( host_spec )
        old.host_id = "1"
        new = copy.deepcopy( host_spec )
        new.host_id = "2"
        assert requires_replacement( old, new ) is True


class TestHostResource:

    def test_lifecycle(self, z, host_spec):
        z.hostgroup.get.return_value = [ { "groupid": "7", "name": "Linux servers" } ]
        z.template.get.return_value = []
        z.host.create.return_value = { "hostids": [ "10055" ] }
        z.host.get.return_value = [ { "hostid": "10055", "host": "srv1", "name": "srv1", "status": "0", "macros": [], "interfaces": [] } ]

        resource = HostResource( z, legacy_main_flag=False )

        resource.create( host_spec )
        assert host_spec.id == "10055"

        resource.read( host_spec )
        assert host_spec.name == "srv1"
        assert host_spec.macro == {}

        resource.update( host_spec )
        assert z.host.update.call_args.kwargs["hostid"] == "10055"

        resource.delete( host_spec )
        z.host.delete.assert_called_once_with( "10055" )
        assert host_spec.id is None
        assert host_spec.host_id == ""
        assert host_spec.to_config()["host_id"] == ""

    def test_from_settings(self, monkeypatch):
        created = {}

        def fake_client(setting):
            created["setting"] = setting
            return "handle"

        monkeypatch.setattr( "zabbix_resource.resource.get_zabbix_client", fake_client )
        setting = Setting( api_endpoint="https://zabbix.example.com", legacy_main_flag=True )

        resource = HostResource.from_settings( setting )

        assert resource.z == "handle"
        assert resource.legacy_main_flag is True
        assert created["setting"] is setting
