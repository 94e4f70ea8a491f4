"""
Zabbix Resource - Host Description Data Structures

This module defines the desired-state records the orchestrator hands to the
adapter, and decodes them once from the flat configuration mapping:

- `InterfaceSpec`: one network endpoint of the host
- `HostSpec`: the complete host description, including computed outputs

Defaults are applied while decoding, so the rest of the package works on
typed records only.
"""

# Standard library
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

# Zabbix resource imports
from zabbix_resource.exceptions import ResourceError


DEFAULT_INTERFACE_PORT = "10050"
DEFAULT_INTERFACE_TYPE = "agent"


def _required(config, key, where):
    if config.get( key ) is None:
        raise ResourceError( f"{where}{key} is required", value=key )
    return config[key]


def _collection(config, key, kinds=( list, tuple, set, frozenset )):
    value = config.get( key )
    if value is None:
        return []
    if isinstance( value, ( str, bytes ) ) or not isinstance( value, kinds ):
        raise ResourceError( f"{key} must be a list, got {type( value ).__name__}", value=key )
    return value


def _str(value):
    return "" if value is None else str( value )


@dataclass
class InterfaceSpec:
    """
    Desired state of a host interface.

    Attributes:
        main (bool): Whether the interface is the primary one of its kind.
        dns (str): DNS name, empty if unset.
        ip (str): IP address, empty if unset.
        port (str): Port the monitoring server connects to.
        type (str): Interface kind: agent, snmp, ipmi or jmx.
        interface_id (str): Zabbix interface ID, computed.
    """
    main: bool
    dns: str = ""
    ip: str = ""
    port: str = DEFAULT_INTERFACE_PORT
    type: str = DEFAULT_INTERFACE_TYPE
    interface_id: str = ""

    @classmethod
    def from_config(cls, config: dict, index: int = 0) -> "InterfaceSpec":
        where = f"interfaces.{index}."
        return cls(
            main         = bool( _required( config, "main", where ) ),
            dns          = _str( config.get( "dns" ) ),
            ip           = _str( config.get( "ip" ) ),
            port         = _str( config.get( "port" ) ) or DEFAULT_INTERFACE_PORT,
            type         = _str( config.get( "type" ) ) or DEFAULT_INTERFACE_TYPE,
            interface_id = _str( config.get( "interface_id" ) ),
        )

    def to_config(self) -> dict:
        return {
            "dns":          self.dns,
            "ip":           self.ip,
            "main":         self.main,
            "port":         self.port,
            "type":         self.type,
            "interface_id": self.interface_id,
        }


@dataclass
class HostSpec:
    """
    Desired state of a Zabbix host.

    Attributes:
        host (str): Technical name of the host.
        interfaces (list[InterfaceSpec]): Interfaces, in configuration order.
        groups (set[str]): Names of the host groups the host belongs to.
        name (str): Visible name; computed by Zabbix when left empty.
        monitored (bool): Whether the host is monitored.
        templates (set[str]): Technical names of the linked templates.
        macro (dict[str, str]): User macros without the {$...} delimiters.
        host_id (str): Zabbix host ID, computed.
        id (str): Resource identifier tracked by the orchestrator, computed.
    """
    host: str
    interfaces: List[InterfaceSpec]
    groups: Set[str]
    name: str = ""
    monitored: bool = True
    templates: Set[str] = field( default_factory=set )
    macro: Dict[str, str] = field( default_factory=dict )
    host_id: str = ""
    id: Optional[str] = None

    @classmethod
    def from_config(cls, config: dict) -> "HostSpec":
        """
        Decode a host description from its configuration mapping.

        Args:
            config (dict): Mapping with the keys host, name, monitored,
                interfaces, groups, templates, macro and optionally the
                computed host_id.

        Returns:
            HostSpec: The decoded description with defaults applied.

        Raises:
            ResourceError: If a required field is missing or a list field
                holds a single string or another non-list value.
        """
        _required( config, "interfaces", "" )
        _required( config, "groups", "" )
        interfaces = _collection( config, "interfaces", kinds=( list, tuple ) )
        monitored = config.get( "monitored" )
        host_id = _str( config.get( "host_id" ) )

        return cls(
            host       = _str( _required( config, "host", "" ) ),
            name       = _str( config.get( "name" ) ),
            monitored  = True if monitored is None else bool( monitored ),
            interfaces = [ InterfaceSpec.from_config( row, i ) for i, row in enumerate( interfaces ) ],
            groups     = set( _collection( config, "groups" ) ),
            templates  = set( _collection( config, "templates" ) ),
            macro      = { str( k ): _str( v ) for k, v in ( config.get( "macro" ) or {} ).items() },
            host_id    = host_id,
            id         = host_id or None,
        )

    def to_config(self) -> dict:
        return {
            "host":       self.host,
            "host_id":    self.host_id,
            "name":       self.name,
            "monitored":  self.monitored,
            "interfaces": [ iface.to_config() for iface in self.interfaces ],
            "groups":     sorted( self.groups ),
            "templates":  sorted( self.templates ),
            "macro":      dict( self.macro ),
        }
