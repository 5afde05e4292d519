"""Tests for todoappend.composer module."""

from __future__ import annotations

from datetime import date

import pytest

from todoappend.composer import append_task, compose_task, normalise_priority
from todoappend.config import Template
from todoappend.errors import InvalidPriorityError
from todoappend.models import TaskRecord

TODAY = date(2024, 3, 1)


class TestNormalisePriority:
    """Tests for normalise_priority function."""

    def test_empty_values(self) -> None:
        """Test falsy priorities mean none."""
        assert normalise_priority(None) is None
        assert normalise_priority("") is None
        assert normalise_priority("  ") is None

    def test_lowercase(self) -> None:
        """Test letters are upper-cased."""
        assert normalise_priority("b") == "B"

    def test_invalid(self) -> None:
        """Test non-letters are rejected."""
        with pytest.raises(InvalidPriorityError):
            normalise_priority("AB")
        with pytest.raises(InvalidPriorityError):
            normalise_priority("1")


class TestComposeTask:
    """Tests for compose_task function."""

    def test_plain_text(self) -> None:
        """Test text only gives the trimmed description and no tags."""
        record = compose_task("  Buy milk  ", TODAY)
        assert record.description == "Buy milk"
        assert record.projects == []
        assert record.contexts == []
        assert record.tags == {}
        assert record.priority is None
        assert record.creation_date == "2024-03-01"
        assert not record.completed

    def test_template_tags_order(self) -> None:
        """Test projects come before contexts."""
        tmpl = Template(name="Meeting", projects=["work"], contexts=["meeting"])
        record = compose_task("Sync", TODAY, template=tmpl)
        assert record.description == "Sync +work @meeting"
        assert record.projects == ["work"]
        assert record.contexts == ["meeting"]

    def test_empty_template_adds_nothing(self) -> None:
        """Test a template without tags leaves the description alone."""
        record = compose_task("Sync", TODAY, template=Template(name="Empty"))
        assert record.description == "Sync"

    def test_due_today_after_tags(self) -> None:
        """Test due:<today> is appended after template tags."""
        tmpl = Template(name="Work", projects=["work"])
        record = compose_task("Sync", TODAY, due_today=True, template=tmpl)
        assert record.description == "Sync +work due:2024-03-01"
        assert record.tags == {"due": "2024-03-01"}

    def test_due_today_without_template(self) -> None:
        """Test due tag on plain text."""
        record = compose_task("Pay rent", TODAY, due_today=True)
        assert record.description == "Pay rent due:2024-03-01"

    def test_empty_text_is_not_an_error(self) -> None:
        """Test blank input composes an empty description."""
        record = compose_task("   ", TODAY)
        assert record.description == ""

    def test_explicit_priority(self) -> None:
        """Test explicit priority is kept."""
        assert compose_task("Call", TODAY, priority="c").priority == "C"

    def test_template_priority_not_applied(self) -> None:
        """Test a template's priority is not copied onto the task."""
        tmpl = Template(name="Meeting", priority="A")
        assert compose_task("Call", TODAY, template=tmpl).priority is None

    def test_explicit_priority_beats_template(self) -> None:
        """Test explicit priority wins over the template."""
        tmpl = Template(name="Meeting", priority="A")
        assert compose_task("Call", TODAY, priority="B", template=tmpl).priority == "B"

    def test_template_lists_are_copied(self) -> None:
        """Test the record does not share lists with the template."""
        tmpl = Template(name="Work", projects=["work"])
        record = compose_task("Sync", TODAY, template=tmpl)
        record.projects.append("other")
        assert tmpl.projects == ["work"]


class TestAppendTask:
    """Tests for append_task function."""

    def test_trailing_newline(self) -> None:
        """Test result always ends with exactly one newline."""
        record = TaskRecord(description="New", creation_date="2024-03-01")
        assert append_task("old\n\n\n", record) == "old\n2024-03-01 New\n"

    def test_new_file(self) -> None:
        """Test appending to empty content."""
        record = TaskRecord(description="New", creation_date="2024-03-01")
        assert append_task("", record) == "2024-03-01 New\n"

    def test_custom_formatter(self) -> None:
        """Test any formatter callable is used."""
        calls: list[tuple[str, TaskRecord]] = []

        def formatter(existing: str, record: TaskRecord) -> str:
            calls.append((existing, record))
            return "formatted"

        record = TaskRecord(description="New", creation_date="2024-03-01")
        assert append_task("old  \n", record, formatter) == "formatted\n"
        assert calls == [("old", record)]
