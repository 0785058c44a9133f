"""Environment size source for terminal hosts."""

from termlist.terminal.size import TerminalSize, TerminalSizeSource, is_tty, read_terminal_size

__all__ = ["TerminalSize", "TerminalSizeSource", "is_tty", "read_terminal_size"]
