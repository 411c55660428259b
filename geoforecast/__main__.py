"""Allow `python -m geoforecast`."""

import sys

from geoforecast.cli import main

sys.exit(main())
