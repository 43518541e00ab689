# Ensure logging is set up early
from launchkit.cli.config import setup_logging
setup_logging()

# Import the main CLI command.
from launchkit.cli.main import main

if __name__ == "__main__":
    main(prog_name="launchkit")
