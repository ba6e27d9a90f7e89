from coveralls_jacoco.cli.exit_codes import EXIT_CONFIG, EXIT_DATAERR, EXIT_GENERIC, EXIT_NOINPUT, EXIT_OK
from coveralls_jacoco.cli.root import cli, create_app, main

__all__ = [
    "EXIT_CONFIG",
    "EXIT_DATAERR",
    "EXIT_GENERIC",
    "EXIT_NOINPUT",
    "EXIT_OK",
    "cli",
    "create_app",
    "main",
]
