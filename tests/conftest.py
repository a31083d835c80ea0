import pytest

from app import create_app
from tests.factories import make_post, make_project
from utils.data import ContentStore


@pytest.fixture
def app():
    return create_app('testing')


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def small_store():
    return ContentStore(
        projects=[make_project('alpha'), make_project('beta')],
        posts=[make_post('first-post')],
    )


@pytest.fixture
def small_app(small_store):
    return create_app('testing', store=small_store)


@pytest.fixture
def small_client(small_app):
    return small_app.test_client()
