"""Test configuration for pytest."""

import logging
import os
import pytest


@pytest.fixture(autouse=True)
def configure_test_logging():
    """Configure logging for tests to be minimal."""
    # Set environment variable to ensure minimal logging during tests
    os.environ['VALIDITY_LOG_LEVEL'] = 'WARNING'

    # Also configure root logger to be quiet
    logging.getLogger().setLevel(logging.WARNING)

    # Failing laws log at INFO, which many tests provoke on purpose
    for logger_name in ['validity.laws.property', 'validity.laws.scenario']:
        logging.getLogger(logger_name).setLevel(logging.ERROR)
