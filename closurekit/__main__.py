import sys

from closurekit.demo import main

sys.exit(main())
