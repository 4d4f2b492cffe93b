"""Application entry point."""

from __future__ import annotations

import logging
import os
import sys


def main() -> None:
    """Launch the chess board window."""
    from chessgui.ui.bootstrap import run_application

    logging.basicConfig(
        level=os.environ.get("CHESSGUI_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sys.exit(run_application())


if __name__ == "__main__":
    main()
