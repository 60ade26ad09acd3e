import sys

from benchtrack.run_tracker import main

sys.exit(main())
