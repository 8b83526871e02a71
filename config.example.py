# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "MEMENTO_APP_NAME": "App display name, used as the console prompt (default: memento).",
    "MEMENTO_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Store
    "MEMENTO_SEED_DEMO_DATA": "Insert the demo user/projects/tasks/events at startup (default: true).",
    # Connectors
    "MEMENTO_CONSOLE_ENABLED": "Run the interactive console (default: true).",
    # Paths (gitignored)
    "MEMENTO_DATA_DIR": "Local data directory holding memento.log (default: .local/memento).",
}
