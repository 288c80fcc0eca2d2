import pytest
from flask.testing import FlaskClient

from fd_backend.app import create_app
from fd_backend.config import Settings


@pytest.fixture()
def client() -> FlaskClient:
    app = create_app(Settings(cors_origins=["http://localhost:5173"], log_level="DEBUG"))
    app.config.update(TESTING=True)
    with app.test_client() as test_client:
        yield test_client
