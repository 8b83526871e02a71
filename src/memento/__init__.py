"""memento: personal tasks, projects and calendar events over an in-memory store."""

__version__ = "0.1.0"
