"""Allow ``python -m chat_codegen``."""

import sys

from chat_codegen.cli import main

sys.exit(main())
