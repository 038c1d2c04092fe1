"""Pytest configuration and fixtures for the test suite."""

from typing import Generator

import pytest
from flask import Flask
from flask.testing import FlaskClient
from sqlalchemy.exc import OperationalError

from restaurant_api import create_app
from restaurant_api.config import TestingConfig
from restaurant_api.extensions import db
from restaurant_api.seed import seed_database
from restaurant_api.store import RestaurantStore


@pytest.fixture(scope="function")
def app() -> Generator[Flask, None, None]:
    """Create an app backed by a fresh in-memory database holding the seed data.

    This fixture is function-scoped so every test starts from the same rows.
    """
    app = create_app(TestingConfig)

    ctx = app.app_context()
    ctx.push()

    seed_database()

    yield app

    db.session.remove()
    db.drop_all()
    ctx.pop()


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Test client for making requests against the app."""
    return app.test_client()


@pytest.fixture
def store(app: Flask) -> RestaurantStore:
    """A store bound to the test database session."""
    return RestaurantStore(db.session)


class BrokenSession:
    """Session stand-in whose every query fails like a dropped connection."""

    def __init__(self):
        self.rolled_back = False

    def _fail(self, *args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("connection lost"))

    execute = get = commit = _fail

    def add(self, instance):
        pass

    def rollback(self):
        self.rolled_back = True


@pytest.fixture
def broken_session() -> BrokenSession:
    return BrokenSession()
