from __future__ import annotations

import logging
from importlib.metadata import version

__version__ = version("coveralls-jacoco")

logger = logging.getLogger("coveralls_jacoco")

__all__ = ["__version__", "logger"]
