import mongomock
import pytest

from card_advisor.app import create_app
from card_advisor.core import ensure_indexes
from card_advisor.services.catalog import CardCatalog


@pytest.fixture
def database():
    db = mongomock.MongoClient().card_advisor_test
    ensure_indexes(db)
    return db


@pytest.fixture
def catalog(database):
    store = CardCatalog(database)
    store.seed_reference_cards()
    return store


@pytest.fixture
def app(database):
    app = create_app(database=database, settings={"seed_catalog": True, "session_ttl_seconds": 3600})
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
