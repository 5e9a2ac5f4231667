"""
Flask application factory module.

This module creates and configures the Flask application using
the factory pattern, allowing for different configurations
(development, testing, production).

The blog and user stores are built here and registered on
``app.extensions`` so route handlers never reach for a module-level
persistence object. Callers (tests, alternate deployments) may pass
their own store instances instead.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from flask import Flask
from flask_sqlalchemy import SQLAlchemy

from config import get_config

if TYPE_CHECKING:
    from blog_app.stores import BlogStore, UserStore

# Initialize SQLAlchemy without binding to app
db = SQLAlchemy()

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(
    config_name: str | None = None,
    blog_store: BlogStore | None = None,
    user_store: UserStore | None = None,
) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config_name: Configuration environment name.
                     If None, uses FLASK_ENV environment variable.
        blog_store: Store backing /api/blogs. Defaults to a
                    SQLAlchemy-backed BlogStore.
        user_store: Store backing /api/users. Defaults to a
                    SQLAlchemy-backed UserStore.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__, instance_relative_config=True)

    # Load configuration
    config_class = get_config(config_name)
    app.config.from_object(config_class)

    logger.info("Creating app with config: %s", config_class.__name__)

    # Ensure instance folder exists
    os.makedirs(app.instance_path, exist_ok=True)

    # Initialize extensions
    db.init_app(app)

    from blog_app.stores import BlogStore, UserStore

    app.extensions["blog_store"] = blog_store if blog_store is not None else BlogStore(db)
    app.extensions["user_store"] = user_store if user_store is not None else UserStore(db)

    # Register blueprints
    from blog_app.routes.api import api_bp, register_error_handlers

    app.register_blueprint(api_bp, url_prefix="/api")
    register_error_handlers(app)

    # Create database tables
    with app.app_context():
        db.create_all()
        logger.info("Database tables created")

    return app
