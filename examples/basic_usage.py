# examples/basic_usage.py
"""
Example demonstrating how to load a flat configuration file with flatconf.

This script shows how to:
1. Load a configuration file and carry on with defaults if it is missing.
2. Read typed values with defaults.
3. Report conversion errors without stopping the program.

To run this example:
- Ensure you have flatconf installed (`pip install .` from the project root).
- Run `python examples/basic_usage.py [path/to/file.cfg]`. Without an
  argument it reads `app.cfg` next to this script.
"""

import logging
import sys
from pathlib import Path

import flatconf
from flatconf.logging_config import configure_logging, log_display

configure_logging()
logger = logging.getLogger("basic_usage")


def main(path: Path) -> None:
    """Loads the file and prints the resolved settings."""
    config, err = flatconf.load(path)
    if err is not None:
        log_display(logger, logging.WARNING, "%s (using defaults)", err)

    port, err_port = config.get_int("port", 80)
    ratio, err_ratio = config.get_float("ratio", 1.0)
    verbose, err_verbose = config.get_bool("verbose", False)
    retries, err_retries = config.get_int("retries", 3)
    greeting = config.get_string("greeting", "hi")

    for conversion_error in (err_port, err_ratio, err_verbose, err_retries):
        if conversion_error is not None:
            log_display(logger, logging.WARNING, "%s", conversion_error)

    print(f"port={port} ratio={ratio} verbose={verbose} retries={retries} greeting={greeting!r}")


if __name__ == "__main__":
    default_path = Path(__file__).with_name("app.cfg")
    main(Path(sys.argv[1]) if len(sys.argv) > 1 else default_path)
