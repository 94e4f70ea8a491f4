"""
Zabbix Resource - Logger

Provides a module-level logger for the zabbix-resource package.
This logger should be used consistently across all modules to centralize
logging and let the host application control level and output.
"""

# Standard library imports
import logging

# Create a logger instance specific to the package
logger = logging.getLogger( 'zabbix_resource' )
