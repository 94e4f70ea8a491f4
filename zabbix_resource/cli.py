"""
zabbix-host - Command line front end for the Zabbix host resource.

Usage:
    zabbix-host create FILE
    zabbix-host read ID [-f FILE]
    zabbix-host update ID FILE
    zabbix-host delete ID
    zabbix-host check

FILE is a JSON host description with the keys host, name, monitored,
interfaces, groups, templates and macro. Connection settings are read from
the ZABBIX_* environment variables.
"""

# Standard library
import argparse
import json
import logging

# Third-party imports
from rich.console import Console
from rich.markup import escape
from rich.table import Table

# Zabbix resource imports
from zabbix_resource import __version__
from zabbix_resource.exceptions import ExceptionWithData
from zabbix_resource.models import HostSpec
from zabbix_resource.resource import HostResource
from zabbix_resource.settings import get_settings, ZabbixSettingNotFound
from zabbix_resource.zabbix import api as zapi


console = Console()


def load_host_spec(path):
    with open( path, "r" ) as f:
        return HostSpec.from_config( json.load( f ) )


def host_table(host_spec, title="Zabbix Host"):
    """Render a HostSpec as a two-column table."""
    table = Table( title=title )
    table.add_column( "Field", style="bold" )
    table.add_column( "Value", overflow="fold" )

    table.add_row( "host_id", host_spec.host_id )
    table.add_row( "host", host_spec.host )
    table.add_row( "name", host_spec.name )
    table.add_row( "monitored", str( host_spec.monitored ) )
    table.add_row( "groups", ", ".join( sorted( host_spec.groups ) ) )
    table.add_row( "templates", ", ".join( sorted( host_spec.templates ) ) )
    for name, value in sorted( host_spec.macro.items() ):
        table.add_row( f"macro {name}", value )
    for i, iface in enumerate( host_spec.interfaces ):
        address = iface.ip or iface.dns
        main = " (main)" if iface.main else ""
        table.add_row( f"interface {i}", f"{iface.type} {address}:{iface.port}{main} id={iface.interface_id}" )
    return table


def build_parser():
    parser = argparse.ArgumentParser( prog="zabbix-host", description="Manage a Zabbix host from a JSON description" )
    parser.add_argument( "-v", "--verbose", action="store_true", help="Enable debug logging" )
    parser.add_argument( "--version", action="version", version=f"%(prog)s {__version__}" )

    sub = parser.add_subparsers( dest="action", required=True )

    p = sub.add_parser( "create", help="Create the host described in FILE" )
    p.add_argument( "file" )

    p = sub.add_parser( "read", help="Read host ID from Zabbix" )
    p.add_argument( "id" )
    p.add_argument( "-f", "--file", help="Host description to refresh" )

    p = sub.add_parser( "update", help="Update host ID from the description in FILE" )
    p.add_argument( "id" )
    p.add_argument( "file" )

    p = sub.add_parser( "delete", help="Delete host ID" )
    p.add_argument( "id" )

    sub.add_parser( "check", help="Validate the Zabbix credentials" )

    return parser


def run(args, resource):
    if args.action == "check":
        console.print( f"[green]Zabbix API version {zapi.get_version( resource.z )}[/green]" )
        return

    if args.action == "create":
        host_spec = resource.create( load_host_spec( args.file ) )
        console.print( host_table( host_spec, title="Created Zabbix Host" ) )

    elif args.action == "read":
        if args.file:
            host_spec = load_host_spec( args.file )
        else:
            host_spec = HostSpec( host="", interfaces=[], groups=set() )
        host_spec.host_id = host_spec.id = args.id
        console.print( host_table( resource.read( host_spec ) ) )

    elif args.action == "update":
        host_spec = load_host_spec( args.file )
        host_spec.host_id = host_spec.id = args.id
        resource.update( host_spec )
        console.print( f"[green]Updated Zabbix host {args.id}[/green]" )

    elif args.action == "delete":
        host_spec = HostSpec( host="", interfaces=[], groups=set(), host_id=args.id, id=args.id )
        resource.delete( host_spec )
        console.print( f"[green]Deleted Zabbix host {args.id}[/green]" )


def main(argv=None):
    args = build_parser().parse_args( argv )

    logging.basicConfig( level=logging.DEBUG if args.verbose else logging.WARNING,
                         format="%(levelname)s %(name)s: %(message)s" )

    try:
        resource = HostResource.from_settings( get_settings() )
        run( args, resource )
    except ( ExceptionWithData, ZabbixSettingNotFound, ValueError, OSError ) as e:
        console.print( f"[red]{escape( str( e ) )}[/red]" )
        return 1

    return 0
