import pytest
from PyQt6.QtCore import QCoreApplication

from buildconfig import constants
from buildconfig.utils import config as config_module


@pytest.fixture(scope="session")
def q_app():
    """Provides a QCoreApplication instance for the test session."""
    return QCoreApplication.instance() or QCoreApplication([])


@pytest.fixture(autouse=True)
def clean_build_config(monkeypatch):
    """Clears the process-wide build configuration and policy override around every test."""
    monkeypatch.delenv(constants.config.defaults.ENV_VAR_POLICY, raising=False)
    config_module.reset()
    yield
    config_module.reset()
