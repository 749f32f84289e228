# taskpad/__main__.py
"""Entry point for ``python -m taskpad`` and the ``taskpad`` console script."""

from taskpad.core.config import app_config
from taskpad.helpers._logger import setup_logging
from taskpad.ui.app import TaskpadApp


def main() -> None:
    setup_logging(log_level=app_config.log_level, log_dir=app_config.log_dir)
    TaskpadApp(config=app_config).run()


if __name__ == "__main__":
    main()
