"""
Database models for the Blog List application.

This module defines SQLAlchemy models representing the data structure
of the application. Each model maps to a database table.
"""

from __future__ import annotations

from typing import Any

from werkzeug.security import check_password_hash, generate_password_hash

from blog_app import db


class Blog(db.Model):
    """
    Blog model representing a bookmarked blog post.

    Attributes:
        id: Unique identifier for the blog.
        title: Title of the post.
        author: Optional author name.
        url: Address of the post.
        likes: Number of likes, zero unless given.
    """

    __tablename__ = "blogs"

    id: int = db.Column(db.Integer, primary_key=True)
    title: str = db.Column(db.String(300), nullable=False)
    author: str | None = db.Column(db.String(200), nullable=True)
    url: str = db.Column(db.String(2048), nullable=False)
    likes: int = db.Column(db.BigInteger, nullable=False, default=0)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the blog to a dictionary representation.

        Returns:
            Dictionary containing all blog fields.
        """
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "url": self.url,
            "likes": self.likes,
        }

    def __repr__(self) -> str:
        """Return string representation of the blog."""
        return f"<Blog {self.id}: {self.title}>"


class User(db.Model):
    """
    User model for registered accounts.

    Passwords are never stored in plain text, only a one-way hash is
    persisted. ``to_dict`` omits ``password_hash`` so its output can be
    returned from the API as-is.

    Attributes:
        id: Auto-incrementing integer primary key.
        username: Unique login name. The unique index is what makes
            concurrent registrations with the same name fail.
        name: Optional display name.
        password_hash: Werkzeug-generated hash of the user's password.
    """

    __tablename__ = "users"

    id: int = db.Column(db.Integer, primary_key=True)
    username: str = db.Column(db.String(80), unique=True, nullable=False, index=True)
    name: str | None = db.Column(db.String(120), nullable=True)
    password_hash: str = db.Column(db.String(256), nullable=False)

    def set_password(self, password: str) -> None:
        """Hash and store a plain-text password."""
        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        """Return True when *password* matches the stored hash."""
        return check_password_hash(self.password_hash, password)

    def to_dict(self) -> dict[str, Any]:
        """
        Return a user-safe dictionary representation.

        Returns:
            A dict containing ``id``, ``username`` and ``name``.
        """
        return {
            "id": self.id,
            "username": self.username,
            "name": self.name,
        }

    def __repr__(self) -> str:
        return f"<User {self.id}: {self.username}>"
