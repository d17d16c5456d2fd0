import sys

from questcalc.main import main

sys.exit(main())
