from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from edchoice.app import create_app
from edchoice.config import Settings


@pytest.fixture()
def settings() -> Settings:
    return Settings(app_env="test", log_level="DEBUG", cors_origins="http://localhost:5173")


@pytest.fixture()
def client(settings: Settings) -> FlaskClient:
    flask_app = create_app(settings)
    flask_app.config["TESTING"] = True
    with flask_app.test_client() as test_client:
        yield test_client
