# taskpad/ui/__init__.py

from .app import TaskpadApp

__all__ = ["TaskpadApp"]
