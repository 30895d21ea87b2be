"""Test configuration and fixtures for the library catalog."""

import os
from pathlib import Path

# Configuration is loaded on first import of the runtime context, so the test
# environment has to be in place before any src module is imported.
os.environ["APP_ENVIRONMENT"] = "test"
os.environ["APP_CONFIG_FILE"] = str(Path(__file__).resolve().parents[1] / "config.yaml")
os.environ["TEST_DATABASE_URL"] = "sqlite://"
os.environ["TEST_CATALOG_SEED_SAMPLE_DATA"] = "false"
os.environ["TEST_LOG_LEVEL"] = "WARNING"

from tests.fixtures import *  # noqa: E402,F401,F403
