"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) architecture and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Parses the command line and configures logging.
2. Instantiates the scene store holding the initial SceneState.
3. Instantiates the Main Window (View) and passes the store into it.
4. Prevents circular import errors by being the orchestrator.
"""
import argparse
import logging
from typing import Optional, Sequence

from stereotrig import __version__
from stereotrig.app import create_app
from stereotrig.controller.store import SceneStore
from stereotrig.logging_config import setup_logging
from stereotrig.model.state import SceneState
from stereotrig.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="stereotrig",
        description="Interactive visualizer of stereo-camera triangulation.",
    )
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    parser.add_argument("--log-file", metavar="PATH", default=None, help="also write the log to PATH")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Data Model
    store = SceneStore(SceneState())

    # 4. Initialize the Main Window, passing the store
    window = MainWindow(store)
    window.show()
    logger.info("Main window shown.")

    # 5. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
