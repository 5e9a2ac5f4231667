"""
Persistence stores for blogs and users.

Each store wraps the Flask-SQLAlchemy handle it is constructed with and
exposes the handful of operations the API needs. Stores raise the
exceptions in :mod:`blog_app.errors`; they never build HTTP responses.

Key Concepts Demonstrated:
- Explicitly constructed stores instead of a module-level database global
- Full-replace updates sharing the create-time validation rules
- Idempotent deletes
- Uniqueness enforced by the database, not only by a read-then-write check
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError

from blog_app.errors import ConflictError, NotFoundError, ValidationError
from blog_app.models import Blog, User

logger = logging.getLogger(__name__)

USERNAME_TAKEN = "given username is already taken"

# Range of the signed 64-bit integer column backing Blog.likes
LIKES_MIN = -(2 ** 63)
LIKES_MAX = 2 ** 63 - 1


def _missing_field(fields: Mapping[str, Any], required_fields: list[str]) -> str | None:
    """
    Check that all *required_fields* are present and non-blank in *fields*.

    Returns:
        An error message naming the first missing or blank field, or
        ``None`` if every required field holds a non-whitespace string.
    """
    for field in required_fields:
        value = fields.get(field)
        if not isinstance(value, str) or not value.strip():
            return f"'{field}' is required"
    return None


def _optional_string(fields: Mapping[str, Any], field: str) -> str | None:
    """
    Return an optional string field, or ``None`` when it is absent.

    Raises:
        ValidationError: If the field is present but not a string.
    """
    value = fields.get(field)
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"'{field}' must be a string")
    return value


class BlogStore:
    """Blog collection backed by the ``blogs`` table."""

    REQUIRED_FIELDS = ["title", "url"]

    def __init__(self, database: SQLAlchemy) -> None:
        self.db = database

    @classmethod
    def _blog_values(cls, fields: Mapping[str, Any]) -> dict[str, Any]:
        """
        Validate a create or replace payload and return column values.

        ``author`` becomes ``None`` and ``likes`` becomes ``0`` when absent,
        so a replace resets any field the client leaves out.

        Raises:
            ValidationError: If ``title`` or ``url`` is missing or blank,
                ``author`` is not a string, or ``likes`` is not an
                integer in the 64-bit range.
        """
        error = _missing_field(fields, cls.REQUIRED_FIELDS)
        if error:
            raise ValidationError(error)

        likes = fields.get("likes")
        if likes is None:
            likes = 0
        # bool is an int subclass; JSON true/false is not a like count
        elif not isinstance(likes, int) or isinstance(likes, bool):
            raise ValidationError("'likes' must be an integer")
        elif not LIKES_MIN <= likes <= LIKES_MAX:
            raise ValidationError("'likes' is out of range")

        return {
            "title": fields["title"],
            "author": _optional_string(fields, "author"),
            "url": fields["url"],
            "likes": likes,
        }

    def list_all(self) -> list[Blog]:
        """Return every blog in insertion order."""
        return list(self.db.session.scalars(select(Blog).order_by(Blog.id)).all())

    def count(self) -> int:
        """Return the number of stored blogs."""
        return self.db.session.scalar(select(func.count()).select_from(Blog))

    def get_by_id(self, blog_id: int) -> Blog:
        """
        Fetch a single blog.

        Raises:
            NotFoundError: If no blog has the given id.
        """
        blog = self.db.session.get(Blog, blog_id)
        if blog is None:
            raise NotFoundError("Blog not found")
        return blog

    def create(self, fields: Mapping[str, Any]) -> Blog:
        """
        Validate and persist a new blog.

        Args:
            fields: Payload with ``title`` and ``url`` (required),
                ``author`` and ``likes`` (optional).

        Returns:
            The stored blog with its generated id.
        """
        blog = Blog(**self._blog_values(fields))
        self.db.session.add(blog)
        self.db.session.commit()
        logger.info("Created blog with ID: %s", blog.id)
        return blog

    def update_by_id(self, blog_id: int, fields: Mapping[str, Any]) -> Blog:
        """
        Replace the title, author, url and likes of an existing blog.

        Raises:
            NotFoundError: If no blog has the given id.
            ValidationError: If the replacement payload is invalid.
        """
        blog = self.get_by_id(blog_id)
        for column, value in self._blog_values(fields).items():
            setattr(blog, column, value)
        self.db.session.commit()
        logger.info("Updated blog %s", blog_id)
        return blog

    def delete_by_id(self, blog_id: int) -> bool:
        """
        Remove a blog if it exists.

        Returns:
            ``True`` if a row was deleted, ``False`` if the id was unknown.
            Neither case is an error.
        """
        result = self.db.session.execute(delete(Blog).where(Blog.id == blog_id))
        self.db.session.commit()
        removed = result.rowcount > 0
        if removed:
            logger.info("Deleted blog %s", blog_id)
        else:
            logger.info("Blog %s already absent, nothing to delete", blog_id)
        return removed


class UserStore:
    """User collection backed by the ``users`` table."""

    REQUIRED_FIELDS = ["username", "password"]

    def __init__(self, database: SQLAlchemy) -> None:
        self.db = database

    def list_all(self) -> list[User]:
        """Return every user in insertion order."""
        return list(self.db.session.scalars(select(User).order_by(User.id)).all())

    def count(self) -> int:
        """Return the number of stored users."""
        return self.db.session.scalar(select(func.count()).select_from(User))

    def find_by_username(self, username: str) -> User | None:
        """Return the user with exactly this username, if any."""
        return self.db.session.scalar(select(User).where(User.username == username))

    def create(self, fields: Mapping[str, Any]) -> User:
        """
        Register a new user.

        The up-front lookup gives the common case a clean error; the unique
        index on ``users.username`` catches two registrations racing past
        that lookup, and the resulting ``IntegrityError`` is reported the
        same way.

        Raises:
            ValidationError: If ``username`` or ``password`` is missing, or
                ``name`` is not a string.
            ConflictError: If the username is already taken.
        """
        error = _missing_field(fields, self.REQUIRED_FIELDS)
        if error:
            raise ValidationError(error)

        name = _optional_string(fields, "name")
        username = fields["username"].strip()
        if self.find_by_username(username) is not None:
            logger.warning("Username %r already taken", username)
            raise ConflictError(USERNAME_TAKEN)

        user = User(username=username, name=name)
        user.set_password(fields["password"])
        self.db.session.add(user)
        try:
            self.db.session.commit()
        except IntegrityError as exc:
            self.db.session.rollback()
            logger.warning("Username %r taken by a concurrent registration", username)
            raise ConflictError(USERNAME_TAKEN) from exc

        logger.info("Created user %s with ID: %s", user.username, user.id)
        return user
