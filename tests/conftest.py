"""Test fixtures and configuration."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterator

import pytest
import structlog

from structmark.config import reset_settings
from structmark.models.types import Article, Organization, Person, Thing


@pytest.fixture(autouse=True)
def _isolated_config() -> Iterator[None]:
    """Fresh settings per test; drop any logging setup a CLI test installed."""
    reset_settings()
    yield
    reset_settings()
    structlog.reset_defaults()


@pytest.fixture
def person() -> Person:
    return Person({"name": "Jane Doe", "jobTitle": "Editor"})


@pytest.fixture
def organization() -> Organization:
    return Organization({"name": "Acme News", "url": "https://acme.org"})


@pytest.fixture
def article(person: Person, organization: Organization) -> Article:
    return Article({
        "headline": "Structured data in practice",
        "author": person,
        "publisher": organization,
        "wordCount": 1200,
        "keywords": ["schema", "seo"],
    })


@pytest.fixture
def thing() -> Thing:
    return Thing({"name": "Test Thing"})


@pytest.fixture
def looped_thing() -> Thing:
    """A Thing whose ``subjectOf`` is itself; only reachable below the model API."""
    entity = Thing({"name": "loop"})
    object.__setattr__(entity, "properties", MappingProxyType({"name": "loop", "subjectOf": entity}))
    return entity
