"""Fastball - environment specific config file generator.

Renders ``.env.erb`` and ``config/*.erb`` templates against ``app_config``
values and writes the results next to the templates.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .generator import ConfigGenerator, generate
from .cli import main

__all__ = ["ConfigGenerator", "generate", "main"]
