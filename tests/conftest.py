"""Shared fixtures for the uniqbot test-suite."""

import os
import random

# Set test environment before importing the app
os.environ["APP_ENV"] = "testing"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AI_PROVIDER"] = "openai"
os.environ["OPENAI_API_KEY"] = ""
os.environ["ANTHROPIC_API_KEY"] = ""
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest

from uniqbot.app import app as flask_app
from uniqbot.config.database import db as _db
from uniqbot.bot.schemas import ChatMessage, ChatbotSettings
from uniqbot.models import ChatbotFallback, ChatbotPattern, ChatbotTrigger


@pytest.fixture
def app():
    """Application with fresh tables for every test."""
    flask_app.config["TESTING"] = True
    with flask_app.app_context():
        _db.create_all()
        yield flask_app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db(app):
    return _db


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def settings():
    return ChatbotSettings()


@pytest.fixture
def ai_disabled(monkeypatch):
    """No provider configured, whatever the environment says."""
    monkeypatch.setattr("uniqbot.vendors.factory.is_ai_configured", lambda: False)


@pytest.fixture
def add_pattern(db):
    def _add(response, triggers, priority=1, is_active=True):
        pattern = ChatbotPattern(response=response, priority=priority, is_active=is_active)
        pattern.triggers = [ChatbotTrigger(phrase=phrase) for phrase in triggers]
        db.session.add(pattern)
        db.session.commit()
        return pattern
    return _add


@pytest.fixture
def add_fallback(db):
    def _add(response):
        fallback = ChatbotFallback(response=response)
        db.session.add(fallback)
        db.session.commit()
        return fallback
    return _add


def user(content):
    return ChatMessage(role="user", content=content)


def assistant(content):
    return ChatMessage(role="assistant", content=content)
