"""Test configuration for pytest."""

import logging
import os
import pytest

# Module loggers read this when they are first created, which happens at import time
os.environ['REPEATED_PHOTOS_LOG_LEVEL'] = 'WARNING'


@pytest.fixture(autouse=True)
def configure_test_logging():
    """Configure logging for tests to be minimal."""
    os.environ['REPEATED_PHOTOS_LOG_LEVEL'] = 'WARNING'

    logging.getLogger().setLevel(logging.WARNING)

    # The walker and relocator log every file at INFO
    for logger_name in ['repeated_photos.scan', 'repeated_photos.relocate']:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
