# taskpad/core/exceptions.py

# SECTION: MODULE DOCSTRING
"""Defines the exception classes raised by the task store and controller."""


# KLASS: TaskpadError
class TaskpadError(Exception):
    """Base class for all Taskpad errors."""


# KLASS: InvalidTaskIndexError
class InvalidTaskIndexError(TaskpadError, IndexError):
    """A position outside the current task collection was used."""

    def __init__(self, index: int, size: int):
        """Initialize the error.

        Args:
            index: The offending position.
            size: Number of tasks in the collection when the lookup happened.
        """
        super().__init__(f"Task index {index} out of range for {size} task(s)")
        self.index = index
        self.size = size


# KLASS: EmptyTaskNameError
class EmptyTaskNameError(TaskpadError, ValueError):
    """Submitted an empty task name while empty names are disabled."""

    def __init__(self, message: str = "Task name must not be empty"):
        super().__init__(message)
