# Make helper modules in this directory importable by dotted path from
# configuration files under test.
import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from cwm.core.live_ui import MemoryLiveUI, set_live_ui  # noqa: E402

TESTS_DIR = Path(__file__).resolve().parent
if str(TESTS_DIR) not in sys.path:
    sys.path.insert(0, str(TESTS_DIR))


@pytest.fixture
def live_ui():
    backend = MemoryLiveUI()
    previous = set_live_ui(backend)
    yield backend
    set_live_ui(previous)


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
