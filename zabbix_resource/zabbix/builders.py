"""
Zabbix Resource - Payload Builders

This module constructs the host object sent to host.create() and
host.update() from a HostSpec.

Key functionality:
- Map the monitored flag to the Zabbix host status
- Translate interfaces and encode user macros (no remote calls)
- Resolve host group and template names to IDs (remote reads)
- Drop interfaces and add the hostid for update payloads
"""

# Zabbix resource imports
from zabbix_resource import settings
from zabbix_resource.zabbix.interfaces import translate_interfaces
from zabbix_resource.zabbix.macros import encode_macros
from zabbix_resource.zabbix.resolvers import resolve_host_groups, resolve_templates


STATUS_MONITORED   = 0
STATUS_UNMONITORED = 1


def host_status(monitored: bool) -> int:
    return STATUS_MONITORED if monitored else STATUS_UNMONITORED


def payload(z, host_spec, for_update=False, legacy_main_flag=None) -> dict:
    """
    Construct a Zabbix host payload from a HostSpec.

    Interfaces and macros are translated before any remote lookup is made,
    so an invalid description fails without touching the server. Group and
    template names are then resolved through the API handle.

    Args:
        z (ZabbixAPI): API handle used for the group and template lookups.
        host_spec (HostSpec): The host description.
        for_update (bool, optional): Build a host.update() payload instead of
            a host.create() payload. Update payloads carry the hostid and no
            interfaces.
        legacy_main_flag (bool, optional): Override the configured primary
            interface behaviour.

    Returns:
        dict: Dictionary suitable for host.create() or host.update().

    Raises:
        InvalidInterfaceType, MissingAddress, InvalidAddress: Invalid interface.
        UnknownGroup, UnknownTemplate: A named group or template is missing.
        RemoteCallFailed: A lookup call failed.
        ValueError: for_update is set but the description has no host ID.
    """
    if legacy_main_flag is None:
        legacy_main_flag = settings.get_legacy_main_flag()

    interfaces = translate_interfaces( host_spec.interfaces, legacy_main_flag )
    macros = encode_macros( host_spec.macro )

    payload = {
        "host":      host_spec.host,
        "name":      host_spec.name,
        "status":    host_status( host_spec.monitored ),
        "groups":    resolve_host_groups( z, host_spec.groups ),
        "templates": resolve_templates( z, host_spec.templates ),
        "macros":    macros,
    }

    if for_update:
        hostid = host_spec.id or host_spec.host_id
        if not hostid:
            raise ValueError( f"Host '{host_spec.host}' has no host id to update" )
        payload["hostid"] = str( hostid )
    else:
        payload["interfaces"] = interfaces

    return payload
