# Make the flat top-level packages (api, core, services, ui) importable when
# tests run from a checkout.
import os
import sys

import pytest

SERVICE_ROOT = os.path.dirname(__file__)

if SERVICE_ROOT not in sys.path:
    sys.path.insert(0, SERVICE_ROOT)


class RecordingLogger:
    """In-memory RequestLogger for tests."""

    def __init__(self):
        self.forwards = []
        self.errors = []

    def log_forward(self, method, url, status):
        self.forwards.append((method, url, status))

    def log_error(self, route, status, message):
        self.errors.append((route, status, message))


@pytest.fixture
def recording_logger():
    return RecordingLogger()
