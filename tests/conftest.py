import pytest
from bs4 import BeautifulSoup

from terra_site import create_app
from terra_site.config.settings import TestingConfig


@pytest.fixture
def app():
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def page(client):
    """Parsed landing page with no context message configured"""
    resp = client.get('/')
    assert resp.status_code == 200
    return BeautifulSoup(resp.get_data(as_text=True), 'html.parser')
