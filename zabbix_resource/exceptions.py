"""
Zabbix Resource - Custom exception classes for the host resource adapter.

Defines specialized exception types that carry the offending value and
additional contextual data, so the orchestrator calling the adapter can
present precise error messages without parsing strings.
"""


class ExceptionWithData(Exception):
    """
    A custom exception class that carries additional structured data alongside
    the error message.

    This is useful in scenarios where simply raising an exception with a string
    is not enough, and additional context (such as a failed API payload or the
    parameters of a remote lookup) needs to be passed along with the error.

    Attributes:
        data (Any): Arbitrary structured data associated with the exception.

    Example:
        >>> payload = {"host": "srv1", "status": "0"}
        >>> raise ExceptionWithData("Failed to create host in Zabbix", payload)

        try:
            ...
        except ExceptionWithData as e:
            print(e)        # Output: Failed to create host in Zabbix
            print(e.data)   # Output: {'host': 'srv1', 'status': '0'}
    """
    def __init__(self, message, data=None):
        """
        Intialize ExceptionWithData
        """
        super().__init__( message )
        self.data = data


class ResourceError(ExceptionWithData):
    """Base class for errors raised while translating a host description."""

    def __init__(self, message, value=None, data=None):
        super().__init__( message, data=data )
        self.value = value


# ------------------------------------------------------------------------------
# Interface translation
# ------------------------------------------------------------------------------


class InvalidInterfaceType(ResourceError):
    """Raised when an interface kind is not one of agent, snmp, ipmi or jmx."""

    def __init__(self, value):
        super().__init__( f"{value} isn't a valid interface type", value=value )


class MissingAddress(ResourceError):
    """Raised when an interface has neither a DNS name nor an IP address."""

    def __init__(self, index=None):
        super().__init__( "At least one of dns or ip must be set", value=index )


class InvalidAddress(ResourceError):
    """Raised when an interface IP is neither an address nor a user macro."""

    def __init__(self, value):
        super().__init__( f"{value} isn't a valid IP address", value=value )


# ------------------------------------------------------------------------------
# Name resolution
# ------------------------------------------------------------------------------


class UnknownGroup(ResourceError):
    """Raised when a host group named in the description is missing in Zabbix."""

    def __init__(self, value):
        super().__init__( f"Host group {value} doesn't exist in zabbix server", value=value )


class UnknownTemplate(ResourceError):
    """Raised when a template named in the description is missing in Zabbix."""

    def __init__(self, value):
        super().__init__( f"Template {value} doesn't exist in zabbix server", value=value )


# ------------------------------------------------------------------------------
# Macros
# ------------------------------------------------------------------------------


class InvalidMacroName(ResourceError):
    """Raised when a remote macro name does not follow the {$NAME} convention."""

    def __init__(self, value):
        super().__init__( f"Invalid macro name \"{value}\"", value=value )


# ------------------------------------------------------------------------------
# Remote calls
# ------------------------------------------------------------------------------


class RemoteCallFailed(ExceptionWithData):
    """
    Raised when a call through the Zabbix API handle fails.

    Wraps network, authentication and server-side validation errors alike.
    The remote method name is kept in `method`, the request parameters in
    `data`, and the original exception is chained as `__cause__`.
    """

    def __init__(self, message, method=None, data=None):
        super().__init__( message, data=data )
        self.method = method


class HostNotFound(RemoteCallFailed):
    """Raised when a Zabbix host is not present in Zabbix."""
    pass
