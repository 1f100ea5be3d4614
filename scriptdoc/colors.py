"""ANSI escape sequences used for terminal output."""

CLEAR_COLOR = "\x1b[0m"
BHI_WHITE = "\x1b[1;97m"
B_GREEN = "\x1b[1;32m"
B_YELLOW = "\x1b[1;33m"
B_PURPLE = "\x1b[1;35m"
B_CYAN = "\x1b[1;36m"