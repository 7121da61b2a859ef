import sys

from toast.scripts.toast_cli import main

sys.exit(main())
