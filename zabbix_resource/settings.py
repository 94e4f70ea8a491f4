"""
Zabbix Resource - Configuration Utilities

This module provides helpers for retrieving the connection settings used to
reach the Zabbix server. Settings are read from ZABBIX_* environment
variables, which is where the orchestrator running the adapter passes
provider configuration. It also defines the related custom exception and
provides safe accessors.
"""

# Standard library
from typing import Optional

# Third-party imports
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Zabbix resource imports
from zabbix_resource.logger import logger


# ------------------------------------------------------------------------------
# Custom exception definitions for configuration errors
# ------------------------------------------------------------------------------

class ZabbixSettingNotFound(Exception):
    """Raised when a required Zabbix setting is not present in the environment."""
    pass


# ------------------------------------------------------------------------------
# Setting
# ------------------------------------------------------------------------------


ENV_PREFIX       = "ZABBIX_"
ENV_API_ENDPOINT = "ZABBIX_SERVER_URL"


class Setting(BaseSettings):
    """
    Connection and behaviour settings for the host resource.

    Every field is read from the environment variable ZABBIX_<FIELD>, except
    `api_endpoint`, which is read from ZABBIX_SERVER_URL.

    Attributes:
        api_endpoint (str): URL of the Zabbix frontend, e.g. https://zabbix.example.com.
        user (str): User name for password login.
        password (str): Password for password login.
        api_token (str): API token; preferred over user/password when set.
        tls_insecure (bool): Skip TLS certificate verification.
        timeout (float | None): Request timeout in seconds.
        legacy_main_flag (bool): Send every interface as the primary one,
            matching records written by earlier versions of the adapter.
    """
    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
        env_ignore_empty=True,
        populate_by_name=True,
        extra="ignore",
    )

    api_endpoint: str = Field( default="", validation_alias=ENV_API_ENDPOINT )
    user: str = ""
    password: str = ""
    api_token: str = ""
    tls_insecure: bool = False
    timeout: Optional[float] = None
    legacy_main_flag: bool = False

    @field_validator( "api_endpoint" )
    @classmethod
    def strip_endpoint(cls, value):
        return value.strip()


def load_settings():
    """
    Build a Setting from the environment.

    Returns:
        Setting | None: The settings, or None if no API endpoint is configured.

    Raises:
        ValidationError: If a variable cannot be converted, e.g. ZABBIX_TIMEOUT=soon.
    """
    setting = Setting()
    if not setting.api_endpoint:
        return None
    return setting


# ------------------------------------------------------------------------------
# Get Setting instance
# ------------------------------------------------------------------------------


def get_settings():
    """
    Retrieve the Zabbix settings from the environment.

    Raises:
        ZabbixSettingNotFound: If no API endpoint is configured.
        ValidationError: If a variable cannot be converted.

    Returns:
        Setting: The Zabbix setting object.
    """
    setting = load_settings()
    if not setting:
        msg = "Missing Zabbix Configuration"
        logger.error( msg )
        raise ZabbixSettingNotFound( msg )
    return setting


def get_settings_safe(default=None):
    """
    Safely retrieve the Zabbix settings from the environment.
    If no setting is found or the environment is malformed, the provided
    default value is returned instead.

    Args:
        default (Any, optional): Value to return if no setting is available.

    Returns:
        Setting | Any: The Setting object, or the default value if unavailable.
    """
    try:
        return load_settings() or default
    except ValidationError as e:
        logger.warning( f"Failed to read Zabbix settings from environment: {e}" )
        return default


def safe_setting(default=None):
    """
    Decorator that ensures safe access to Zabbix settings functions.

    Wraps a function so that it receives the current Setting instance, or
    returns a default value if the Setting is not available.

    Args:
        default (Any, optional): Value returned when the Setting is missing.

    Returns:
        function: A decorator that wraps the target function.
    """
    def decorator(func):
        def wrapper(*args, **kwargs):
            s = get_settings_safe()
            if s is None:
                return default
            return func( s, *args, **kwargs )
        return wrapper
    return decorator


# ------------------------------------------------------------------------------
# Interfaces
# ------------------------------------------------------------------------------


@safe_setting(False)
def get_legacy_main_flag(s):
    """
    Retrieve whether interfaces are always sent as primary.

    Returns:
        bool: True if the legacy primary flag behaviour is enabled.
    """
    return s.legacy_main_flag
