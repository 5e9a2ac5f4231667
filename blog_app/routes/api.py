"""
REST API endpoints for blogs and users.

Handlers parse the JSON body, call one store operation and turn the
result, or the store's exception, into a JSON response. Stores are
looked up on ``current_app.extensions`` where ``create_app`` put them.

Endpoints:
    GET    /api/health         - Health check
    GET    /api/blogs          - List all blogs
    GET    /api/blogs/<id>     - Get a single blog by ID
    POST   /api/blogs          - Create a new blog
    PUT    /api/blogs/<id>     - Replace an existing blog
    DELETE /api/blogs/<id>     - Delete a blog (idempotent)
    GET    /api/users          - List all users
    POST   /api/users          - Register a new user
"""

from __future__ import annotations

import logging
import os
from typing import Any

from flask import Blueprint, Flask, Response, current_app, jsonify, request

from blog_app.errors import StoreError
from blog_app.stores import BlogStore, UserStore

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


# -----------------------------------------------------------------------------
# Helper Functions
# -----------------------------------------------------------------------------

def _json_error(message: str, status_code: int) -> tuple[Response, int]:
    """Build a ``{"error": "..."}`` response with the given status."""
    return jsonify({"error": message}), status_code


def _blog_store() -> BlogStore:
    return current_app.extensions["blog_store"]


def _user_store() -> UserStore:
    return current_app.extensions["user_store"]


def _json_body() -> dict[str, Any] | None:
    """
    Return the request body as a dict.

    Returns:
        The parsed JSON object, or ``None`` when the body is missing,
        malformed, or not a JSON object.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return None
    return data


# -----------------------------------------------------------------------------
# API Endpoints
# -----------------------------------------------------------------------------

@api_bp.route("/health", methods=["GET"])
def health_check() -> tuple[Response, int]:
    """Health check endpoint for deployment verification."""
    return jsonify({
        "status": "healthy",
        "environment": os.getenv("ENVIRONMENT", "unknown"),
        "version": os.getenv("APP_VERSION", "unknown")
    }), 200


@api_bp.route("/blogs", methods=["GET"])
def get_blogs() -> tuple[Response, int]:
    """
    List all blogs in insertion order.

    Returns:
        JSON array of blogs and 200 status code.
    """
    logger.info("GET /api/blogs - Fetching all blogs")

    blogs = _blog_store().list_all()
    logger.info("Found %d blogs", len(blogs))

    return jsonify([blog.to_dict() for blog in blogs]), 200


@api_bp.route("/blogs/<int:blog_id>", methods=["GET"])
def get_blog(blog_id: int) -> tuple[Response, int]:
    """
    Get a single blog by ID.

    Returns:
        JSON blog and 200 status code, or error message and 404.
    """
    logger.info("GET /api/blogs/%s - Fetching blog", blog_id)

    blog = _blog_store().get_by_id(blog_id)
    return jsonify(blog.to_dict()), 200


@api_bp.route("/blogs", methods=["POST"])
def create_blog() -> tuple[Response, int]:
    """
    Create a new blog.

    Request Body (JSON):
        title: Blog title (required)
        url: Blog address (required)
        author: Author name (optional)
        likes: Like count (optional, default: 0)

    Returns:
        JSON response with created blog and 201 status code,
        or error message and 400 if validation fails.
    """
    logger.info("POST /api/blogs - Creating new blog")

    data = _json_body()
    if data is None:
        return _json_error("Request body must be JSON", 400)

    blog = _blog_store().create(data)
    return jsonify(blog.to_dict()), 201


@api_bp.route("/blogs/<int:blog_id>", methods=["PUT"])
def update_blog(blog_id: int) -> tuple[Response, int]:
    """
    Replace an existing blog.

    Every mutable field is overwritten: ``author`` and ``likes`` fall
    back to their defaults when left out of the body.

    Returns:
        JSON response with updated blog and 200 status code,
        or error message and 404/400 if not found or validation fails.
    """
    logger.info("PUT /api/blogs/%s - Updating blog", blog_id)

    data = _json_body()
    if data is None:
        return _json_error("Request body must be JSON", 400)

    blog = _blog_store().update_by_id(blog_id, data)
    return jsonify(blog.to_dict()), 200


@api_bp.route("/blogs/<int:blog_id>", methods=["DELETE"])
def delete_blog(blog_id: int) -> tuple[str, int]:
    """
    Delete a blog.

    Returns:
        Empty 204 response whether or not the blog existed.
    """
    logger.info("DELETE /api/blogs/%s - Deleting blog", blog_id)

    _blog_store().delete_by_id(blog_id)
    return "", 204


@api_bp.route("/users", methods=["GET"])
def get_users() -> tuple[Response, int]:
    """List all users without their password hashes."""
    logger.info("GET /api/users - Fetching all users")

    users = _user_store().list_all()
    return jsonify([user.to_dict() for user in users]), 200


@api_bp.route("/users", methods=["POST"])
def create_user() -> tuple[Response, int]:
    """
    Register a new user.

    Request Body (JSON):
        username: Login name (required, unique)
        password: Plain-text password (required, stored hashed)
        name: Display name (optional)

    Returns:
        JSON response with the created user and 200 status code,
        or ``{"error": "given username is already taken"}`` and 400.
    """
    logger.info("POST /api/users - Creating new user")

    data = _json_body()
    if data is None:
        return _json_error("Request body must be JSON", 400)

    user = _user_store().create(data)
    return jsonify(user.to_dict()), 200


# -----------------------------------------------------------------------------
# Error Handlers
# -----------------------------------------------------------------------------

@api_bp.errorhandler(StoreError)
def store_error(error: StoreError) -> tuple[Response, int]:
    """Map store exceptions to their JSON error response."""
    logger.warning("%s %s failed: %s", request.method, request.path, error.message)
    return _json_error(error.message, error.status_code)


def register_error_handlers(app: Flask) -> None:
    """
    Render framework-level HTTP errors as JSON.

    Routing failures (unknown path, wrong method) happen before any
    blueprint is selected, so these live on the application.
    """

    @app.errorhandler(400)
    def bad_request(error: Exception) -> tuple[Response, int]:
        """Handle 400 Bad Request errors."""
        return _json_error("Bad request", 400)

    @app.errorhandler(404)
    def not_found(error: Exception) -> tuple[Response, int]:
        """Handle 404 Not Found errors."""
        return _json_error("Resource not found", 404)

    @app.errorhandler(405)
    def method_not_allowed(error: Exception) -> tuple[Response, int]:
        """Handle 405 Method Not Allowed errors."""
        return _json_error("Method not allowed", 405)

    @app.errorhandler(500)
    def internal_error(error: Exception) -> tuple[Response, int]:
        """Handle 500 Internal Server errors."""
        logger.error("Internal server error: %s", error)
        return _json_error("Internal server error", 500)
