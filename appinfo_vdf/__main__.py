import sys

from appinfo_vdf.main import main

sys.exit(main())
