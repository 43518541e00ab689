# launchkit/__main__.py

# Import the logging setup early so that it applies to all loggers.
from launchkit.cli.config import setup_logging
setup_logging()  # Replaced by the configured level once settings are loaded.

# Now import the main CLI command.
from launchkit.cli.main import main

if __name__ == "__main__":
    main(prog_name="launchkit")
