import sys

from runner.worker import main

sys.exit(main())
