import sys

from skkdic_expr.cli import main

sys.exit(main())
