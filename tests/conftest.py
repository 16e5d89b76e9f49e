"""Shared fixtures for the insight orchestration tests."""

from __future__ import annotations

import asyncio

import pytest

from transparentgov.backends.base import GenerationError
from transparentgov.models.catalog import Catalog
from transparentgov.models.sample_data import SAMPLE_AUDITS, sample_catalog


class StubBackend:
    """Backend returning a canned reply (or raising) and recording prompts."""

    name = "Stub"

    def __init__(self, reply: str = "generated text") -> None:
        self.reply = reply
        self.error: Exception | None = None
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


class ControlledBackend:
    """Backend whose calls stay pending until the test resolves them."""

    name = "Controlled"

    def __init__(self) -> None:
        self.calls: list[tuple[str, asyncio.Future]] = []

    async def generate(self, prompt: str) -> str:
        future = asyncio.get_running_loop().create_future()
        self.calls.append((prompt, future))
        return await future

    def resolve(self, index: int, text: str) -> None:
        self.calls[index][1].set_result(text)

    def fail(self, index: int, exc: GenerationError) -> None:
        self.calls[index][1].set_exception(exc)


@pytest.fixture
def catalog() -> Catalog:
    return sample_catalog()


@pytest.fixture
def all_fair_catalog() -> Catalog:
    items = []
    for item in SAMPLE_AUDITS:
        fair = dict(item)
        fair["status"] = "Fair"
        items.append(fair)
    return Catalog.from_dicts(items)


@pytest.fixture
def stub_backend() -> StubBackend:
    return StubBackend()


@pytest.fixture
def controlled_backend() -> ControlledBackend:
    return ControlledBackend()
