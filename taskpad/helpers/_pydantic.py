# taskpad/helpers/_pydantic.py

# SECTION: MODULE DOCSTRING
"""Shared Pydantic base configuration for Taskpad models.

Every model handed to the UI is an immutable snapshot, so the base model is
frozen and rejects unknown fields.
"""

# SECTION: IMPORTS
from pydantic import BaseModel, ConfigDict


# KLASS: TaskpadBaseModel
class TaskpadBaseModel(BaseModel):
    """Base model with consistent configuration for all Taskpad models."""

    model_config = ConfigDict(
        frozen=True,  # Snapshots are never mutated after creation
        extra="forbid",
        use_enum_values=False,  # Keep DialogState members, not their str values
    )
