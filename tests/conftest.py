import pytest

from linechange.config import Config
from linechange.ui.web_app import WebAppState, create_app

from fakes import FakeClock


def _config_mapping(config_class) -> dict:
    return {key: getattr(config_class, key) for key in dir(config_class) if key.isupper()}


@pytest.fixture()
def test_config(tmp_path):
    class TestConfig(Config):
        TESTING = True
        CAP_MINUTES = 1
        NAMES_FILE = str(tmp_path / "names.json")
        SAVE_DIR = str(tmp_path / "saves")
        STATIC_FOLDER = str(tmp_path)
        LOG_DIR = ''

    return TestConfig


@pytest.fixture()
def fake_clock():
    return FakeClock()


@pytest.fixture()
def app_state(test_config, fake_clock):
    return WebAppState(_config_mapping(test_config), clock=fake_clock)


@pytest.fixture()
def flask_app(test_config, app_state):
    return create_app(test_config, app_state=app_state)


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()
