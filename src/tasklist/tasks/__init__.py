"""
Task subsystem.

Components:
- task_models.py: data structures (Priority, DueTag, EditField, Task)
- validation.py: date/time/text parsing into canonical values
- due.py: reference clock + due-status classification
- builder.py: staged construction of a fully populated Task
- task_store.py: in-memory ordered store with 1-based positions
- errors.py: user-facing error kinds
"""
