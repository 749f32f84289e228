# taskpad/__init__.py
"""Taskpad Package Initialization.

A single-screen terminal task manager: create, edit, delete and list named
tasks with free-text descriptions. Tasks live in memory for the session only.
"""

# --- Define Package Metadata ---
__version__ = "1.0.0"
