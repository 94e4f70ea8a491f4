"""
Zabbix Resource - Wrapper functions for the Zabbix API

One thin function per remote operation used by the host resource. Every
function takes the API handle `z` (an authenticated `pyzabbix.ZabbixAPI`)
as its first argument; the handle is owned by the caller and never cached
here. Any failure raised by the API layer is re-raised as RemoteCallFailed
carrying the method name and request parameters.
"""

from pyzabbix import ZabbixAPI

from zabbix_resource.settings import get_settings
from zabbix_resource.exceptions import RemoteCallFailed, HostNotFound
from zabbix_resource.logger import logger


def get_zabbix_client(setting=None):
    """
    Initializes and returns an authenticated Zabbix API client.

    Uses the given Setting, or the one loaded from the environment, to
    instantiate and authenticate a ZabbixAPI client. An API token is
    preferred; user and password are used otherwise.

    Args:
        setting (Setting, optional): Connection settings.

    Returns:
        ZabbixAPI: An authenticated Zabbix API client instance.

    Raises:
        ZabbixSettingNotFound: If the configuration is missing.
        RemoteCallFailed: If authentication fails or the server is unreachable.
    """
    if setting is None:
        setting = get_settings()

    try:
        z = ZabbixAPI( setting.api_endpoint, timeout=setting.timeout )
        if setting.tls_insecure:
            z.session.verify = False

        if setting.api_token:
            z.login( api_token=setting.api_token )
        else:
            z.login( user=setting.user, password=setting.password )
        return z

    except Exception as e:
        msg = f"Failed to log in to Zabbix at {setting.api_endpoint}: {e}"
        logger.error( msg )
        raise RemoteCallFailed( msg, "user.login" ) from e


def get_version(z):
    """
    Retrieves the Zabbix server version from the API.

    Returns:
        str: The version of the Zabbix server.
    """
    try:
        return z.apiinfo.version()
    except Exception as e:
        raise RemoteCallFailed( f"Failed to get Zabbix version: {e}", "apiinfo.version" ) from e


# ------------------------------------------------------------------------------
# Host Groups
# ------------------------------------------------------------------------------


def get_host_groups_by_name(z, names):
    """
    Fetch the host groups whose name is one of `names`.

    Args:
        z (ZabbixAPI): API handle.
        names (list[str]): Host group names.

    Returns:
        list[dict]: Host group objects as returned by hostgroup.get.
    """
    params = { "output": "extend", "filter": { "name": list( names ) } }
    try:
        return z.hostgroup.get( **params )
    except Exception as e:
        raise RemoteCallFailed( f"Failed to get host groups from Zabbix: {e}", "hostgroup.get", params ) from e


def get_host_groups_by_hostid(z, hostid):
    """
    Fetch the host groups a host is a member of.

    Args:
        z (ZabbixAPI): API handle.
        hostid (str): ID of the host.

    Returns:
        list[dict]: Host group objects as returned by hostgroup.get.
    """
    params = { "output": "extend", "hostids": [ str( hostid ) ] }
    try:
        return z.hostgroup.get( **params )
    except Exception as e:
        raise RemoteCallFailed( f"Failed to get host groups for host {hostid}: {e}", "hostgroup.get", params ) from e


# ------------------------------------------------------------------------------
# Templates
# ------------------------------------------------------------------------------


def get_templates_by_name(z, names):
    """
    Fetch the templates whose technical name is one of `names`.

    Args:
        z (ZabbixAPI): API handle.
        names (list[str]): Template technical names (the `host` field).

    Returns:
        list[dict]: Template objects as returned by template.get.
    """
    params = { "output": "extend", "filter": { "host": list( names ) } }
    try:
        return z.template.get( **params )
    except Exception as e:
        raise RemoteCallFailed( f"Failed to get templates from Zabbix: {e}", "template.get", params ) from e


def get_templates_by_hostid(z, hostid):
    """
    Fetch the templates linked to a host.

    Args:
        z (ZabbixAPI): API handle.
        hostid (str): ID of the host.

    Returns:
        list[dict]: Template objects as returned by template.get.
    """
    params = { "output": "extend", "hostids": [ str( hostid ) ] }
    try:
        return z.template.get( **params )
    except Exception as e:
        raise RemoteCallFailed( f"Failed to get templates for host {hostid}: {e}", "template.get", params ) from e


# ------------------------------------------------------------------------------
# Hosts
# ------------------------------------------------------------------------------


def get_host_by_id(z, hostid):
    """
    Retrieves a single host from Zabbix by hostid.

    The returned host includes its user macros and interfaces. Validates
    that exactly one host is found.

    Args:
        z (ZabbixAPI): API handle.
        hostid (str): The hostid of the Zabbix host to retrieve.

    Returns:
        dict: A dictionary containing the Zabbix host's details.

    Raises:
        HostNotFound: If no host has the given id.
        RemoteCallFailed: If multiple hosts match or the API call fails.
    """
    params = {
        "output":           "extend",
        "hostids":          [ str( hostid ) ],
        "selectMacros":     "extend",
        "selectInterfaces": "extend",
    }
    try:
        hosts = z.host.get( **params )
    except Exception as e:
        msg = f"Failed to retrieve host with host id '{hostid}' from Zabbix, error: {e}"
        logger.error( msg )
        raise RemoteCallFailed( msg, "host.get", params ) from e

    if not hosts:
        msg = f"No host with host id '{hostid}' found in Zabbix"
        logger.error( msg )
        raise HostNotFound( msg, "host.get", params )

    if len( hosts ) > 1:
        msg = f"Multiple hosts with host id '{hostid}' found in Zabbix"
        logger.error( msg )
        raise RemoteCallFailed( msg, "host.get", params )

    return hosts[0]


def create_host(z, **host):
    """
    Create a new Zabbix host.

    Args:
        z (ZabbixAPI): API handle.
        **host: The host object (host name, interfaces, groups, templates, macros).

    Returns:
        dict: The API response, containing the created `hostids`.
    """
    try:
        return z.host.create( **host )
    except Exception as e:
        raise RemoteCallFailed( f"Failed to create host in Zabbix: {e}", "host.create", host ) from e


def update_host(z, **host):
    """
    Update an existing Zabbix host.

    Args:
        z (ZabbixAPI): API handle.
        **host: The updated host object (must include the `hostid` field).

    Returns:
        dict: The API response, containing the updated `hostids`.
    """
    try:
        return z.host.update( **host )
    except Exception as e:
        raise RemoteCallFailed( f"Failed to update Zabbix host {host.get( 'hostid' )}: {e}", "host.update", host ) from e


def delete_hosts(z, hostids):
    """
    Delete Zabbix hosts by id.

    Args:
        z (ZabbixAPI): API handle.
        hostids (list[str]): IDs of the hosts to delete.

    Returns:
        dict: The API response confirming deletion.
    """
    hostids = [ str( hostid ) for hostid in hostids ]
    try:
        return z.host.delete( *hostids )
    except Exception as e:
        raise RemoteCallFailed( f"Failed to delete Zabbix hosts {hostids}: {e}", "host.delete", hostids ) from e
