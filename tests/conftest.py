"""
Shared pytest fixtures for the Blog List test suite.

This module contains fixtures that are shared across all test modules.
Fixtures follow the Arrange-Act-Assert (AAA) pattern and ensure
test isolation by providing fresh data for each test.

Key Concepts Demonstrated:
- Fixture scopes (function, session)
- Fixture dependencies
- Test data factories
- Database setup/teardown
- Test client creation
"""

import os
from collections.abc import Callable
from typing import Any

import pytest
from faker import Faker

# Set testing environment before importing app
os.environ["FLASK_ENV"] = "testing"

from blog_app import create_app, db
from blog_app.models import Blog, User
from tests.helpers import INITIAL_BLOGS


# Initialize Faker for generating test data
fake = Faker()


# -----------------------------------------------------------------------------
# Application Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def app():
    """
    Create application instance for the test session.

    The 'session' scope means the same app instance is reused
    for all tests.

    Yields:
        Flask application instance configured for testing.
    """
    application = create_app("testing")
    yield application


@pytest.fixture(scope="function")
def client(app):
    """
    Create a test client for making HTTP requests.

    Yields:
        Flask test client for making HTTP requests.
    """
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture(scope="function")
def db_session(app):
    """
    Create a fresh database for each test.

    Creates all tables before the test, then rolls back anything
    uncommitted and drops all tables afterwards.

    Yields:
        Flask-SQLAlchemy handle bound to the app context.
    """
    with app.app_context():
        db.create_all()
        yield db
        db.session.rollback()
        db.drop_all()


# -----------------------------------------------------------------------------
# Test Data Factory Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def blog_factory(db_session) -> Callable[..., Blog]:
    """
    Factory fixture for creating Blog rows directly in the database.

    Example:
        def test_something(blog_factory):
            blog = blog_factory(title="My Blog")
            assert blog.id is not None
    """

    def _create_blog(
        title: str | None = None,
        author: str | None = None,
        url: str | None = None,
        likes: int = 0,
    ) -> Blog:
        blog = Blog(
            title=title or fake.sentence(nb_words=4),
            author=author or fake.name(),
            url=url or fake.url(),
            likes=likes,
        )
        db_session.session.add(blog)
        db_session.session.commit()
        return blog

    return _create_blog


@pytest.fixture
def user_factory(db_session) -> Callable[..., User]:
    """
    Factory fixture for creating User rows with a hashed password.
    """

    def _create_user(
        username: str | None = None,
        name: str | None = None,
        password: str = "sekret",
    ) -> User:
        user = User(username=username or fake.unique.user_name(), name=name)
        user.set_password(password)
        db_session.session.add(user)
        db_session.session.commit()
        return user

    return _create_user


@pytest.fixture
def initial_blogs(blog_factory) -> list[Blog]:
    """Seed the database with the standard set of initial blogs."""
    return [blog_factory(**blog) for blog in INITIAL_BLOGS]


@pytest.fixture
def root_user(user_factory) -> User:
    """A single pre-existing user named ``root``."""
    return user_factory(username="root", password="sekret")


# -----------------------------------------------------------------------------
# Test Data Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def valid_blog_data() -> dict[str, Any]:
    """
    Provide valid blog data for POST/PUT requests.

    Returns:
        Dictionary with every blog field set.
    """
    return {
        "title": "Testi Testaajan blogi",
        "author": "Testi Testaaja",
        "url": "http://example.com/testi",
        "likes": 0,
    }


@pytest.fixture
def valid_user_data() -> dict[str, str]:
    """Provide a registration payload with a fresh username."""
    return {
        "username": "mluukkai",
        "name": "Matti Luukkainen",
        "password": "salainen",
    }


# -----------------------------------------------------------------------------
# API Helper Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def api_headers() -> dict[str, str]:
    """
    Provide common headers for API requests.

    Returns:
        Dictionary of HTTP headers.
    """
    return {
        "Content-Type": "application/json",
        "Accept": "application/json"
    }
