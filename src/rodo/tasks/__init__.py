"""
Task subsystem.

Components:
- task_models.py: in-memory aggregate (TaskList owning its ordered Tasks)
- task_store.py: SQLite-backed storage, upserts and the active-list pointer
- errors.py: error taxonomy raised by models/store
"""
