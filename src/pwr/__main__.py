import sys

from pwr.main import main

sys.exit(main())
