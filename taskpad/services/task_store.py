# taskpad/services/task_store.py

from __future__ import annotations

from typing import Iterator

from taskpad.core.exceptions import InvalidTaskIndexError
from taskpad.helpers._logger import get_logger
from taskpad.models.task import Task

log = get_logger("store")


class TaskStore:
    """Ordered in-memory mapping of task name to description.

    Insertion order is display order. Writing an existing name overwrites the
    description and keeps the entry where it is.
    """

    def __init__(self, tasks: dict[str, str] | None = None):
        self._tasks: dict[str, str] = dict(tasks or {})

    # --- Mutations ---

    def add(self, name: str, description: str) -> None:
        """Inserts a task at the end, or overwrites the description of an existing one."""
        if name in self._tasks:
            log.debug(f"Overwriting task '{name}'")
        else:
            log.debug(f"Appending task '{name}' at position {len(self._tasks)}")
        self._tasks[name] = description

    def edit(self, name: str, description: str) -> None:
        """Same as ``add``: the store does not tell inserts from updates."""
        self.add(name, description)

    def delete(self, name: str) -> bool:
        """Removes the task if present.

        Returns:
            True if an entry was removed, False when the name was absent.
        """
        if name not in self._tasks:
            log.debug(f"Delete ignored, no task named '{name}'")
            return False
        del self._tasks[name]
        log.debug(f"Deleted task '{name}'")
        return True

    def rename(self, old_name: str, new_name: str, description: str) -> None:
        """Renames ``old_name`` to ``new_name`` keeping its position.

        A different entry already holding ``new_name`` is dropped. When
        ``old_name`` is absent this behaves like ``add``.
        """
        if old_name not in self._tasks:
            self.add(new_name, description)
            return
        rebuilt: dict[str, str] = {}
        for key, value in self._tasks.items():
            if key == old_name:
                rebuilt[new_name] = description
            elif key != new_name:
                rebuilt[key] = value
        self._tasks = rebuilt
        log.debug(f"Renamed task '{old_name}' to '{new_name}' in place")

    def clear(self) -> None:
        self._tasks.clear()

    # --- Queries ---

    def get(self, index: int) -> Task:
        """Returns the task at ``index`` in current iteration order.

        Raises:
            InvalidTaskIndexError: If ``index`` is negative or past the end.
        """
        if not 0 <= index < len(self._tasks):
            raise InvalidTaskIndexError(index, len(self._tasks))
        name = list(self._tasks)[index]
        return Task(name=name, description=self._tasks[name])

    def index_of(self, name: str) -> int:
        """Position of ``name``, or -1 when absent."""
        for position, key in enumerate(self._tasks):
            if key == name:
                return position
        return -1

    def names(self) -> list[str]:
        return list(self._tasks)

    def snapshot(self) -> tuple[Task, ...]:
        """Consistent copy of the collection, in order."""
        return tuple(Task(name=name, description=description) for name, description in self._tasks.items())

    def as_dict(self) -> dict[str, str]:
        return dict(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, name: object) -> bool:
        return name in self._tasks

    def __iter__(self) -> Iterator[Task]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        return f"TaskStore(size={len(self._tasks)})"
