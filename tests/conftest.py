"""Pytest configuration and fixtures."""

from collections.abc import Generator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from pointpath.config import configure_logging
from pointpath.database import Base
from pointpath.domain.document.nodes import DocumentTree, ElementNode, LineBreakNode, TextNode
from pointpath.infrastructure.persistence import models  # noqa: F401

configure_logging("test")

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Create test engine
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def sample_tree() -> DocumentTree:
    """Three blocks covering inline elements, line breaks and nested blocks.

    Rendered text per block:
        0: "Hello bold world"
        1: "a\\nb"
        2: "ab\\n\\ncd"
    """
    return DocumentTree.from_blocks(
        ElementNode(
            [
                TextNode("Hello "),
                ElementNode([TextNode("bold")], inline=True, tag="strong"),
                TextNode(" world"),
            ]
        ),
        ElementNode([TextNode("a"), LineBreakNode(), TextNode("b")]),
        ElementNode(
            [ElementNode([TextNode("ab")]), ElementNode([TextNode("cd")])],
            tag="quote",
        ),
    )
