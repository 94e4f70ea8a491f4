"""
Zabbix Resource - Host Resource Definition

This module is the entry point used by the declarative orchestrator:

- `HOST_SCHEMA` / `INTERFACE_SCHEMA`: the fields the orchestrator diffs,
  with their defaults and which changes force the host to be recreated
- `requires_replacement()`: decides between update and recreate
- `HostResource`: binds an API handle to the create/read/update/delete
  operations
"""

# Standard library
from dataclasses import dataclass
from typing import Any

# Zabbix resource imports
from zabbix_resource.models import DEFAULT_INTERFACE_PORT, DEFAULT_INTERFACE_TYPE
from zabbix_resource.zabbix import hosts
from zabbix_resource.zabbix.api import get_zabbix_client


@dataclass(frozen=True)
class Field:
    type: str
    required: bool = False
    computed: bool = False
    default: Any = None
    force_new: bool = False
    description: str = ""

    @property
    def optional(self):
        return not self.required


INTERFACE_SCHEMA = {
    "dns":          Field( "string", force_new=True ),
    "ip":           Field( "string", force_new=True ),
    "main":         Field( "bool", required=True, force_new=True ),
    "port":         Field( "string", default=DEFAULT_INTERFACE_PORT, force_new=True ),
    "type":         Field( "string", default=DEFAULT_INTERFACE_TYPE, force_new=True ),
    "interface_id": Field( "string", computed=True, force_new=True ),
}

HOST_SCHEMA = {
    "host":       Field( "string", required=True, description="Technical name of the host." ),
    "host_id":    Field( "string", computed=True, force_new=True, description="(readonly) ID of the host" ),
    "name":       Field( "string", computed=True, description="Visible name of the host." ),
    "monitored":  Field( "bool", default=True ),
    "interfaces": Field( "list", required=True, force_new=True ),
    "groups":     Field( "set", required=True ),
    "templates":  Field( "set" ),
    "macro":      Field( "map", description="User macros for the host." ),
}


def _interface_fields(iface):
    # interface_id is computed and left out of the comparison
    return ( iface.dns, iface.ip, iface.main, iface.port, iface.type )


def requires_replacement(old, new) -> bool:
    """
    Tell whether going from `old` to `new` needs the host to be recreated.

    Any change to the interface list, including its order, forces a
    replacement, as does a differing host ID when both are known.

    Args:
        old (HostSpec): Current state.
        new (HostSpec): Desired state.

    Returns:
        bool: True if the host must be deleted and created again.
    """
    if [ _interface_fields( i ) for i in old.interfaces ] != [ _interface_fields( i ) for i in new.interfaces ]:
        return True

    if old.host_id and new.host_id and old.host_id != new.host_id:
        return True

    return False


class HostResource:
    """
    Zabbix host resource bound to an API handle.

    The handle is owned by the caller; the resource keeps no other state
    between calls.

    Attributes:
        z (ZabbixAPI): Authenticated API handle.
        legacy_main_flag (bool | None): Primary interface behaviour override.
    """

    schema = HOST_SCHEMA

    def __init__(self, z, legacy_main_flag=None):
        self.z = z
        self.legacy_main_flag = legacy_main_flag

    @classmethod
    def from_settings(cls, setting):
        return cls( get_zabbix_client( setting ), legacy_main_flag=setting.legacy_main_flag )

    def create(self, host_spec):
        hosts.create_zabbix_host( self.z, host_spec, legacy_main_flag=self.legacy_main_flag )
        return host_spec

    def read(self, host_spec):
        return hosts.read_zabbix_host( self.z, host_spec )

    def update(self, host_spec):
        hosts.update_zabbix_host( self.z, host_spec, legacy_main_flag=self.legacy_main_flag )
        return host_spec

    def delete(self, host_spec):
        hosts.delete_zabbix_host( self.z, host_spec )
        host_spec.id = None
        host_spec.host_id = ""
        return host_spec
