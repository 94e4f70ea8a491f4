"""
Zabbix Resource - Host CRUD Operations

This module implements the create, read, update and delete operations of
the host resource. Each operation works on one HostSpec and one API handle:

- Creation builds the full host object and records the assigned host ID
- Reading copies the server's view back onto the description
- Updating sends everything except interfaces, which can only be replaced
  by recreating the host
- Deletion removes the host by ID, leaving shared groups and templates alone

Failures are raised to the caller as-is; nothing is retried or rolled back.
"""

from zabbix_resource.zabbix import builders
from zabbix_resource.zabbix import api as zapi
from zabbix_resource.zabbix.interfaces import link_interface_ids
from zabbix_resource.zabbix.macros import decode_macros
from zabbix_resource.exceptions import RemoteCallFailed
from zabbix_resource.logger import logger


def _hostid(host_spec):
    hostid = host_spec.id or host_spec.host_id
    if not hostid:
        raise ValueError( f"Host '{host_spec.host}' has no host id" )
    return str( hostid )


def create_zabbix_host(z, host_spec, legacy_main_flag=None):
    """
    Create a host in Zabbix from a HostSpec.

    On success the assigned host ID is stored both as `host_id` and as the
    resource `id` of the description.

    Args:
        z (ZabbixAPI): API handle.
        host_spec (HostSpec): The host description.
        legacy_main_flag (bool, optional): Override the primary interface behaviour.

    Returns:
        tuple[str, dict]: Zabbix host ID and the payload sent to the API.

    Raises:
        RemoteCallFailed: If the creation fails or no hostid is returned.
    """
    payload = builders.payload( z, host_spec, for_update=False, legacy_main_flag=legacy_main_flag )

    result = zapi.create_host( z, **payload )

    hostids = ( result or {} ).get( "hostids" ) or [None]
    hostid = hostids[0]
    if not hostid:
        raise RemoteCallFailed( f"Zabbix failed to return hostid for {host_spec.host}", "host.create", payload )

    hostid = str( hostid )
    logger.debug( f"Created host id is {hostid}" )

    host_spec.host_id = hostid
    host_spec.id = hostid
    return hostid, payload


def read_zabbix_host(z, host_spec):
    """
    Refresh a HostSpec from the host stored in Zabbix.

    Copies host, name and monitored state, the names of the linked templates
    and host groups, and the user macros. Interfaces are not rebuilt from
    Zabbix; only the `interface_id` of the described interfaces is filled in.

    Args:
        z (ZabbixAPI): API handle.
        host_spec (HostSpec): The description to refresh, updated in place.

    Returns:
        HostSpec: The refreshed description.

    Raises:
        HostNotFound: If the host no longer exists.
        InvalidMacroName: If a macro on the host is not of the form {$NAME}.
        RemoteCallFailed: If any lookup fails.
    """
    hostid = _hostid( host_spec )
    logger.debug( f"Will read host with id {hostid}" )

    host = zapi.get_host_by_id( z, hostid )
    logger.debug( f"Host name is {host.get( 'name' )}" )

    host_spec.host = host.get( "host", host_spec.host )
    host_spec.name = host.get( "name", "" )
    host_spec.monitored = int( host.get( "status", builders.STATUS_MONITORED ) ) == builders.STATUS_MONITORED

    templates = zapi.get_templates_by_hostid( z, hostid )
    host_spec.templates = { t["host"] for t in templates }

    groups = zapi.get_host_groups_by_hostid( z, hostid )
    host_spec.groups = { g["name"] for g in groups }

    host_spec.macro = decode_macros( host.get( "macros", [] ) )

    link_interface_ids( host_spec.interfaces, host.get( "interfaces", [] ) )

    host_spec.host_id = hostid
    host_spec.id = hostid
    return host_spec


def update_zabbix_host(z, host_spec, legacy_main_flag=None):
    """
    Update an existing Zabbix host from its HostSpec.

    The payload never contains interfaces: Zabbix links interfaces to items,
    so changing them in place is unreliable and sending the previous values
    makes the update fail. Interface changes replace the host instead.

    Args:
        z (ZabbixAPI): API handle.
        host_spec (HostSpec): The host description, with its host ID.
        legacy_main_flag (bool, optional): Override the primary interface behaviour.

    Returns:
        dict: Message and the payload sent to the API.

    Raises:
        RemoteCallFailed: If the update fails.
    """
    payload = builders.payload( z, host_spec, for_update=True, legacy_main_flag=legacy_main_flag )

    zapi.update_host( z, **payload )
    logger.debug( f"Updated host id is {payload['hostid']}" )

    return {
        "message": f"Updated Zabbix host {payload['hostid']}",
        "data": payload,
    }


def delete_zabbix_host(z, host_spec):
    """
    Delete a Zabbix host by its ID.

    Host groups and templates are shared objects and are left untouched.

    Args:
        z (ZabbixAPI): API handle.
        host_spec (HostSpec): The host description, with its host ID.

    Returns:
        dict: Message confirming deletion.

    Raises:
        RemoteCallFailed: If deletion fails.
    """
    hostid = _hostid( host_spec )
    zapi.delete_hosts( z, [ hostid ] )
    logger.debug( f"Deleted host id {hostid}" )

    return { "message": f"Deleted zabbix host {hostid}" }
