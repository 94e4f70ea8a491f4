import sys

from zabbix_resource.cli import main


sys.exit( main() )
