"""Upbound API configuration constants."""

import os

from ._version import __version__

DEFAULT_BASE_URL = os.environ.get("UP_ENDPOINT", "https://api.upbound.io")
USER_AGENT = f"upbound-sdk-python/{__version__}"
DEFAULT_TIMEOUT = 10.0  # seconds
