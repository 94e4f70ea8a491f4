"""
Zabbix Resource - User Macro Codec

Zabbix stores host user macros as `{$NAME}`; the host description exposes
them as plain `NAME` keys. This module maps between the two.
"""

from zabbix_resource.exceptions import InvalidMacroName


MACRO_PREFIX = "{$"
MACRO_SUFFIX = "}"


def encode_macros(macros) -> list:
    """
    Build the Zabbix `macros` list from a NAME -> value mapping.

    Always returns a list, empty when no macros are given, so host.update()
    clears macros that were removed from the description.

    Args:
        macros (dict | None): Macro names without delimiters, mapped to values.

    Returns:
        list[dict]: Objects with `macro` ({$NAME}) and `value` keys.
    """
    return [
        { "macro": f"{MACRO_PREFIX}{name}{MACRO_SUFFIX}", "value": value }
        for name, value in ( macros or {} ).items()
    ]


def decode_macro_name(raw: str) -> str:
    """
    Strip the `{$` and `}` delimiters from a Zabbix macro name.

    The name must consist of the prefix, exactly one non-empty interior
    segment, and the suffix.

    Raises:
        InvalidMacroName: If `raw` does not follow that form.
    """
    head, sep, rest = raw.partition( MACRO_PREFIX )
    if head or not sep or MACRO_PREFIX in rest:
        raise InvalidMacroName( raw )

    name, sep, tail = rest.partition( MACRO_SUFFIX )
    if not name or not sep or tail:
        raise InvalidMacroName( raw )

    return name


def decode_macros(zbx_macros) -> dict:
    """
    Build a NAME -> value mapping from the macros of a Zabbix host.

    Args:
        zbx_macros (list[dict]): Objects with `macro` and `value` keys.

    Returns:
        dict: Macro names without delimiters, mapped to their values.

    Raises:
        InvalidMacroName: If a macro name is not of the form {$NAME}.
    """
    return { decode_macro_name( m.get( "macro", "" ) ): m.get( "value", "" ) for m in zbx_macros or [] }
