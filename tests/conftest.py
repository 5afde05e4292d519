"""Shared fixtures for todoappend tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from todoappend.clock import FixedClock
from todoappend.config import AppConfig, Template
from todoappend.engine import TodoEngine


@pytest.fixture
def task_file(tmp_path: Path) -> Path:
    """Path of a todo.txt that does not exist yet."""
    return tmp_path / "todo.txt"


@pytest.fixture
def sample_templates() -> list[Template]:
    return [
        Template(name="Work/General", projects=["work"]),
        Template(name="Work/Meeting", projects=["work"], contexts=["meeting"], priority="A"),
        Template(name="Empty"),
    ]


@pytest.fixture
def config(task_file: Path, sample_templates: list[Template]) -> AppConfig:
    return AppConfig(file_path=str(task_file), templates=sample_templates)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock("2024-03-01")


@pytest.fixture
def engine(config: AppConfig, clock: FixedClock) -> TodoEngine:
    return TodoEngine(config, clock=clock)


@pytest.fixture
def sample_todo(task_file: Path) -> Path:
    """A todo.txt with a mix of active, completed and blank lines."""
    content = """\
(A) 2024-01-01 Task1
2024-01-01 Task2 due:2024-01-01
x 2024-01-05 2024-01-01 Done already due:2024-01-01

(B) 2024-02-01 Report +work due:2024-03-05
Someday maybe
"""
    task_file.write_text(content)
    return task_file
