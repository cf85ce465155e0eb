import sys

from ascii_raster.cli import main


sys.exit(main())
