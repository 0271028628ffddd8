"""
Application Initialization
==========================
This module wires the Model, the Store and the View together and starts the
Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the scene model (SceneState) and the Store around it.
2. Instantiates the Main Window (View) and passes the Store into it.
3. Prevents circular import errors by being the orchestrator.
"""
import sys

from barycentricexplorer import config
from barycentricexplorer.app.application import create_app
from barycentricexplorer.app.state import Store
from barycentricexplorer.logging_config import setup_logging
from barycentricexplorer.model.state import SceneState
from barycentricexplorer.view.main_window import MainWindow


def main() -> None:
    # Set LOG_LEVEL to "DEBUG" to follow every projection and rebalance
    setup_logging(level=config.LOG_LEVEL)

    app = create_app()

    store = Store(SceneState())

    window = MainWindow(store)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
