"""
Top-level package for zabbix-resource.

Declarative resource adapter for Zabbix hosts. Translates a flat host
description into Zabbix API calls and maps the server's answers back into
the same description.

Attributes:
    __author__ (str): The author of the package.
    __email__ (str): The author's email.
    __version__ (str): Package version.
"""

__author__ = """pergus"""
__email__ = "pergus@axis.com"
__version__ = "1.0.0"


from zabbix_resource.models import HostSpec, InterfaceSpec
from zabbix_resource.resource import HostResource, requires_replacement

__all__ = [
    "HostSpec",
    "InterfaceSpec",
    "HostResource",
    "requires_replacement",
]
