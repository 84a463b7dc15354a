import sys

from url_coordinates.main import main

sys.exit(main())
