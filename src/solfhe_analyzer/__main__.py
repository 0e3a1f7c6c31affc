import sys

from solfhe_analyzer.cli import main

sys.exit(main())
