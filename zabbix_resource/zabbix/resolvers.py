"""
Zabbix Resource - Host Group and Template Resolution

Resolves the group and template names of a host description to the ID
references host.create() and host.update() expect, verifying that every
named object exists on the Zabbix server.
"""

from zabbix_resource.zabbix import api as zapi
from zabbix_resource.exceptions import UnknownGroup, UnknownTemplate
from zabbix_resource.logger import logger


def resolve_names(*, names, fetch_remote, name_field, id_field, not_found, kind):
    """
    Generic resolver for Zabbix objects looked up by name.

    Fetches all remote objects whose name is in `names` with a single call.
    If fewer objects come back than were asked for, the requested names are
    checked in sorted order and the first missing one is reported.

    Args:
        names (Iterable[str]): Requested names.
        fetch_remote (callable): Called with the sorted list of names; returns remote objects.
        name_field (str): Field of the remote object holding the name.
        id_field (str): Field of the remote object holding the ID.
        not_found (type): Exception class raised with the missing name.
        kind (str): Friendly name for logging (e.g., "host group").

    Returns:
        list[dict]: One `{id_field: id}` reference per remote object.
    """
    requested = sorted( set( names ) )
    logger.debug( f"Resolving {kind}s {requested}" )

    # An empty name filter would match every object on the server
    if not requested:
        return []

    items = fetch_remote( requested )

    if len( items ) < len( requested ):
        logger.debug( f"Not all of the specified {kind}s were found on zabbix server" )
        found = { item.get( name_field ) for item in items }
        for name in requested:
            if name not in found:
                raise not_found( name )
            logger.debug( f"{kind} {name} exists on zabbix server" )

    return [ { id_field: item[id_field] } for item in items ]


def resolve_host_groups(z, names) -> list:
    """
    Resolve host group names to `{"groupid": ...}` references.

    Raises:
        UnknownGroup: If a named group does not exist in Zabbix.
        RemoteCallFailed: If the lookup fails.
    """
    return resolve_names( names        = names,
                          fetch_remote = lambda requested: zapi.get_host_groups_by_name( z, requested ),
                          name_field   = "name",
                          id_field     = "groupid",
                          not_found    = UnknownGroup,
                          kind         = "host group" )


def resolve_templates(z, names) -> list:
    """
    Resolve template technical names to `{"templateid": ...}` references.

    An empty set of names resolves to an empty list without calling Zabbix.

    Raises:
        UnknownTemplate: If a named template does not exist in Zabbix.
        RemoteCallFailed: If the lookup fails.
    """
    return resolve_names( names        = names,
                          fetch_remote = lambda requested: zapi.get_templates_by_name( z, requested ),
                          name_field   = "host",
                          id_field     = "templateid",
                          not_found    = UnknownTemplate,
                          kind         = "template" )
