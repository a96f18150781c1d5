"""Pytest configuration and fixtures."""

import json
from typing import Any

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.domain.prompts.cache import DefaultConfigCache
from app.persistence.database import Base
from app.persistence.models import *  # noqa: F401, F403


@pytest.fixture
async def db_session():
    """Create a test database session."""
    # Use in-memory SQLite for testing
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with async_session() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def default_cache():
    """Fresh default-config cache per test."""
    return DefaultConfigCache()


class InMemoryRedis:
    """Stand-in for RedisClient's JSON API, recording calls."""

    def __init__(self) -> None:
        self.store: dict[str, str] = {}
        self.ttls: dict[str, int | None] = {}

    async def get_json(self, key: str) -> Any | None:
        value = self.store.get(key)
        return json.loads(value) if value is not None else None

    async def set_json(self, key: str, value: Any, ttl: int | None = None) -> bool:
        self.store[key] = json.dumps(value)
        self.ttls[key] = ttl
        return True

    async def delete(self, key: str) -> int:
        return 1 if self.store.pop(key, None) is not None else 0


@pytest.fixture
def fake_redis():
    """In-memory Redis replacement."""
    return InMemoryRedis()


@pytest.fixture
def sample_default_config():
    """A small platform default config."""
    return {
        "reasoning_enabled": True,
        "reasoning_steps": [
            {"title": "UNDERSTAND", "instruction": "What is the customer asking?"},
            {"title": "RESPOND", "instruction": "Keep it brief"},
        ],
        "response_style": {
            "tone": "friendly",
            "max_sentences": 2,
            "formality": "casual",
        },
        "tool_rules": ["Rule 1", "Rule 2"],
        "intro_template": "You are a friendly assistant for {client_name}.",
        "tone_instructions": {
            "friendly": "Be warm and approachable",
            "professional": "Be formal and courteous",
        },
        "formality_instructions": {
            "casual": "Use casual language",
            "formal": "Use formal language",
        },
        "tool_format_template": 'USE_TOOL: tool_name\nPARAMETERS: {"key": "value"}',
        "tool_result_instruction": "Summarize results naturally",
        "custom_instructions": None,
        "language_names": {
            "es": "Spanish",
            "he": "Hebrew",
        },
        "language_instruction_template": "You MUST respond in {language_name}.",
    }
