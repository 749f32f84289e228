# tests/conftest.py

from __future__ import annotations

import pytest

from taskpad.core.config import TaskpadConfig
from taskpad.models.state import ScreenState
from taskpad.services.controller import ScreenController
from taskpad.services.task_store import TaskStore


@pytest.fixture()
def config() -> TaskpadConfig:
    """Default settings, isolated from any local .env file."""
    return TaskpadConfig(_env_file=None, allow_empty_name=True, rename_strategy="delete_insert")


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def seeded_store() -> TaskStore:
    return TaskStore({"Buy milk": "2L", "Pay rent": ""})


@pytest.fixture()
def controller(store: TaskStore, config: TaskpadConfig) -> ScreenController:
    return ScreenController(store=store, config=config)


@pytest.fixture()
def seeded_controller(seeded_store: TaskStore, config: TaskpadConfig) -> ScreenController:
    return ScreenController(store=seeded_store, config=config)


@pytest.fixture()
def states(controller: ScreenController) -> list[ScreenState]:
    """Snapshots published by ``controller``, in order."""
    published: list[ScreenState] = []
    controller.subscribe(published.append)
    return published
