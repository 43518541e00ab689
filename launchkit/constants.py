"""Fixed values shared by the host primitives."""

PATH_SEPARATOR = "/"

# Terminal types that cannot handle color or cursor movement.
DUMB_TERMINALS = frozenset({"", "dumb", "emacs", "xterm-mono", "symbolics", "9term"})

DEFAULT_TERMINAL_COLUMNS = 80

# Mode for files written by write_file: rwxr-xr-x.
EXECUTABLE_FILE_MODE = 0o755

DEFAULT_DIRECTORY_MODE = 0o755

READ_CHUNK_SIZE = 4096

MIN_PORT = 1
MAX_PORT = 65535

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
