"""
Application factory
"""

# Python Packages
import logging

import click
from flask import Flask
from flask_cors import CORS
from flask_migrate import Migrate

# Local Imports
from .base import constants
from .config.swagger import api
from .config.urls import URLs
from .config.database import init_db, db





def create_app(config_overrides = None):
    """
    Application Factory
    """

    logging.basicConfig(
        level = constants.LOG_LEVEL.upper(),
        format = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    # App Object
    app = Flask(__name__)
    app.config["DEBUG"] = constants.APP_ENV != "production"
    app.config["SECRET_KEY"] = constants.APP_SECRET_KEY
    app.config.update(config_overrides or {})

    # Initialize Database
    init_db(app)

    # Register models
    from . import models

    # Initialize Migration
    Migrate(app, db)

    # Enable CORS
    CORS(app)

    # Initialize Swagger
    api.init_app(app)

    # Register Namespaces
    URLs.add_namespaces()

    # CLI
    register_commands(app)

    return app



def register_commands(app):
    """ Flask CLI commands... """

    @app.cli.command("seed-chatbot")
    def seed_chatbot():
        """ Copy the built-in patterns and fallbacks into empty tables... """

        from .bot.services.knowledge_service import KnowledgeService

        inserted = KnowledgeService().seed_defaults()
        click.echo(f"Seeded {inserted} chatbot knowledge rows")



# Create app instance for Flask CLI
app = create_app()


if __name__ == "__main__":
    app.run(host = "0.0.0.0", port = 5000)
