# config.example.py

"""
Documentation-only module (safe to commit).

rodo is configured through environment variables, optionally placed in a
local .env file (loaded with python-dotenv, never overriding the real
environment). Nothing is required; every variable has a default.
"""

ENV_VARS = {
    # App / logging
    "RODO_APP_NAME": "Program name shown in --help and --version (default: rodo).",
    "RODO_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    "RODO_LOG_TO_FILE": "Write <data_dir>/rodo.log (true/false, default: true).",
    # Output
    "RODO_COLOR": "Colored output (true/false). Defaults to false when NO_COLOR is set.",
    # Paths
    "RODO_DATA_DIR": "Data directory (default: $XDG_DATA_HOME/rodo or ~/.local/share/rodo).",
    "RODO_DB_PATH": "SQLite database file (default: <data_dir>/rodo.sqlite).",
    "RODO_LOG_PATH": "Log file (default: <data_dir>/rodo.log).",
}
