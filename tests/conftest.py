"""Shared fixtures: Flask app/client and interaction hosts."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from app import create_app
from interactions import Document, ManualScheduler, ScrollLock
from models import Project


SAMPLE_CONTENT = {
    "name": "Ada Example",
    "tagline_texts": ["ab", "xyz"],
    "intro": "Hello there.",
    "about_heading": "Things I like",
    "about_blurb": "Shipping small.",
    "contact_heading": "Say hello",
    "contact_blurb": "Send a note.",
    "email": "ada@example.com",
    "linkedin_url": "https://www.linkedin.com/in/ada/",
    "location_note": "Somewhere",
    "skills": [
        {"icon": "code", "title": "Python", "description": "Mostly Python."},
    ],
    "projects": [
        {
            "id": 1,
            "title": "Alpha",
            "description": "First project",
            "full_description": "The first project, in detail",
            "technologies": ["React", "Node.js", "PostgreSQL", "Stripe", "Docker"],
            "features": ["Sign-in", "Webhooks"],
            "challenges": "Keeping state tidy.",
            "demo_url": "https://demo.example.com",
            "github_url": "https://github.com/example/alpha",
            "image": None,
        },
        {
            "id": 2,
            "title": "Beta",
            "description": "Second project",
            "technologies": ["Python", "FastAPI"],
        },
    ],
}


@pytest.fixture()
def content_path(tmp_path: Path) -> Path:
    path = tmp_path / "portfolio.json"
    path.write_text(json.dumps(SAMPLE_CONTENT), encoding="utf-8")
    return path


@pytest.fixture()
def app(content_path: Path):
    app = create_app("testing")
    app.config.update(
        CONTENT_PATH=str(content_path),
        TYPEWRITER_TYPE_SPEED_MS=10,
        TYPEWRITER_DELETE_SPEED_MS=5,
        TYPEWRITER_DELAY_BETWEEN_MS=100,
        MODAL_CLOSE_DELAY_MS=300,
    )
    return app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture()
def document() -> Document:
    return Document(scroll_lock=ScrollLock())


@pytest.fixture()
def project_one() -> Project:
    return Project(id=1, title="Alpha", description="First", technologies=("React",))


@pytest.fixture()
def project_two() -> Project:
    return Project(id=2, title="Beta", description="Second", technologies=("Python",))
