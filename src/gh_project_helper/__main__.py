"""Allow ``python -m gh_project_helper``."""

import sys

from gh_project_helper.cli import main

if __name__ == "__main__":
    sys.exit(main())
