# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Do NOT commit real tokens. Use .env (local, gitignored).

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "QUICKTASK_APP_NAME": "App display name (default: quicktask).",
    "QUICKTASK_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Paths (gitignored)
    "QUICKTASK_DATA_DIR": "Local data directory, also holds quicktask.log (default: .local/quicktask).",
    "QUICKTASK_TASKS_DB_PATH": "TaskStore SQLite path (default: <data_dir>/tasks.sqlite3).",
    # Task service
    "QUICKTASK_BACKEND": "Task service: local (SQLite) or http (default: local).",
    "QUICKTASK_API_BASE_URL": "REST base URL; tasks are POSTed to <base>/tasks (http backend only).",
    "QUICKTASK_API_TOKEN": "Optional bearer token for the http backend.",
    "QUICKTASK_API_TIMEOUT_SECONDS": "HTTP timeout in seconds (default: 10).",
}
