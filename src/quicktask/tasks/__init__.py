"""
Task service adapters.

Components:
- task_models.py: data structures (Task, TaskStatus)
- task_store.py: SQLite-backed storage
- local_service.py: TaskService over TaskStore
- http_service.py: TaskService over a REST backend
"""
