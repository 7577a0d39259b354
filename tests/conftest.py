import os

# 테스트는 인메모리 SQLite 사용 (beerstock 임포트 전에 설정)
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"

import pytest
from fastapi.testclient import TestClient

from beerstock.core.database import Base, SessionLocal, engine
from beerstock.main import app
from beerstock.models.beer_model import Beer
from beerstock.models.beer_type import BeerType


def beer_payload(**overrides):
    """Default beer used across tests."""
    defaults = {
        "name": "Brahma",
        "brand": "Ambev",
        "max": 50,
        "quantity": 10,
        "type": "LAGER",
    }
    defaults.update(overrides)
    return defaults


def make_beer(**overrides):
    """Beer record as storage holds it, id=1 unless overridden."""
    data = beer_payload(**overrides)
    data.setdefault("id", 1)
    data["type"] = BeerType.parse(data["type"])
    return Beer(**data)


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def client():
    return TestClient(app)
