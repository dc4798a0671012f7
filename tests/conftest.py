from __future__ import annotations

import pytest
from PySide6.QtCore import QCoreApplication

from stereotrig.model.state import SceneState


@pytest.fixture(scope="session")
def qapp():
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def state() -> SceneState:
    return SceneState()
