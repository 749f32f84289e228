# taskpad/models/task.py

# SECTION: MODULE DOCSTRING
"""Defines the Task model: a named unit of work with a free-text description."""

# SECTION: IMPORTS
from __future__ import annotations

from pydantic import Field

from taskpad.helpers._pydantic import TaskpadBaseModel


# KLASS: Task
class Task(TaskpadBaseModel):
    """A single task. The name is its identity inside a collection."""

    name: str = Field(..., description="Unique key of the task. May be empty.")
    description: str = Field("", description="Free-text description, stored verbatim.")

    def as_pair(self) -> tuple[str, str]:
        return self.name, self.description

    def __str__(self) -> str:
        return f"{self.name}: {self.description}" if self.description else self.name
