"""
Zabbix Resource - Interface Translation and Linking

This module converts the interface part of a host description into the
interface objects expected by host.create(), and links computed Zabbix
interface IDs back onto the description after a read.

It includes:

- The fixed table of interface kinds (agent, snmp, ipmi, jmx)
- Validation of kind, address presence and IP syntax
- Derivation of the `useip` and `main` flags
- Matching of Zabbix interface records to described interfaces
"""

# Standard library
from types import MappingProxyType

# Third-party imports
import netaddr

# Zabbix resource imports
from zabbix_resource.exceptions import InvalidInterfaceType, MissingAddress, InvalidAddress
from zabbix_resource.logger import logger


INTERFACE_TYPES = MappingProxyType({
    "agent": 1,
    "snmp":  2,
    "ipmi":  3,
    "jmx":   4,
})


def is_user_macro(value: str) -> bool:
    return value.startswith( "{$" ) and value.endswith( "}" )


def validate_ip(ip: str):
    """
    Check that `ip` is an IPv4/IPv6 address or a user macro reference.

    Raises:
        InvalidAddress: If it is neither.
    """
    if is_user_macro( ip ):
        return
    if netaddr.valid_ipv4( ip, flags=netaddr.INET_PTON ) or netaddr.valid_ipv6( ip ):
        return
    raise InvalidAddress( ip )


def translate_interface(iface, legacy_main_flag=False, index=None) -> dict:
    """
    Translate one InterfaceSpec into a Zabbix interface object.

    Args:
        iface (InterfaceSpec): Interface description.
        legacy_main_flag (bool): Mark the interface as primary regardless of
            its `main` flag.
        index (int, optional): Position in the interface list, for errors.

    Returns:
        dict: Interface object with type, main, useip, ip, dns and port.

    Raises:
        InvalidInterfaceType: If the kind is unknown.
        MissingAddress: If neither ip nor dns is set.
        InvalidAddress: If ip is set but not a valid address.
    """
    type_id = INTERFACE_TYPES.get( iface.type )
    if type_id is None:
        raise InvalidInterfaceType( iface.type )

    if not iface.ip and not iface.dns:
        raise MissingAddress( index )

    if iface.ip:
        validate_ip( iface.ip )

    return {
        "type":  type_id,
        "main":  1 if ( iface.main or legacy_main_flag ) else 0,
        "useip": 1 if iface.ip else 0,
        "ip":    iface.ip,
        "dns":   iface.dns,
        "port":  iface.port,
    }


def translate_interfaces(interfaces, legacy_main_flag=False) -> list:
    """
    Translate an ordered list of InterfaceSpec, keeping the order.

    Raises:
        InvalidInterfaceType, MissingAddress, InvalidAddress: see translate_interface().
    """
    return [ translate_interface( iface, legacy_main_flag, index ) for index, iface in enumerate( interfaces ) ]


def _interface_key(type_id, ip, dns, port):
    return ( int( type_id ), ip or "", dns or "", str( port ) )


def link_interface_ids(interfaces, zbx_interfaces):
    """
    Copy Zabbix interface IDs onto the described interfaces.

    Each described interface is matched on type, ip, dns and port against
    the interface records of the host. Unmatched interfaces keep an empty
    `interface_id`. The described list itself is never extended or reduced.

    Args:
        interfaces (list[InterfaceSpec]): Described interfaces, updated in place.
        zbx_interfaces (list[dict]): Interfaces returned by host.get().
    """
    existing = {}
    for z in zbx_interfaces or []:
        try:
            key = _interface_key( z.get( "type", 0 ), z.get( "ip" ), z.get( "dns" ), z.get( "port", "" ) )
        except ( TypeError, ValueError ):
            logger.debug( f"Skipping Zabbix interface with unexpected type {z.get( 'type' )}" )
            continue
        existing.setdefault( key, str( z.get( "interfaceid", "" ) ) )

    for iface in interfaces:
        type_id = INTERFACE_TYPES.get( iface.type )
        if type_id is None:
            continue
        iface.interface_id = existing.get( _interface_key( type_id, iface.ip, iface.dns, iface.port ), "" )
