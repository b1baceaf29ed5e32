import sys

from roadmap2json.cli import main

sys.exit(main())
