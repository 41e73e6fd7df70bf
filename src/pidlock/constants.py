"""Constants for pidlock."""

# Filesystem permissions
DEFAULT_DIR_MODE = 0o755
DEFAULT_FILE_MODE = 0o644

# Pids are stored as signed 32-bit integers
PID_MIN = -(2**31)
PID_MAX = 2**31 - 1

CONFIG_FILE = "pidlock.toml"
