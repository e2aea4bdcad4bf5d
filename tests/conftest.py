"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach the real upstream or pick up a developer's key
os.environ.setdefault("RATES_API_URL", "https://rates.invalid/latest")
os.environ.setdefault("RATES_API_KEY", "")
os.environ.setdefault("LOG_FORMAT", "text")
