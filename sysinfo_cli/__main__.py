import sys

from sysinfo_cli.main import main

sys.exit(main())
