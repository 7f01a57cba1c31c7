"""Shell-wide state: last exit status, signal notes and heredoc flags."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any

_INTERRUPT_STATUS = 130
_QUIT_STATUS = 131


@dataclass
class ShellState:
    """State shared by every stage of the shell."""

    status: int = 0
    child_signal: int = 0
    eof_line: int = 1
    heredoc_interrupted: bool = False
    heredoc_empty_delimiter: bool = False
    env: Any = None

    def reset(self) -> None:
        """Restore the start-up values, leaving the environment alone."""
        self.status = 0
        self.heredoc_interrupted = False
        self.eof_line = 1
        self.heredoc_empty_delimiter = False
        self.child_signal = 0

    def update_status(self, wait_status: int) -> int:
        """Turn a raw wait status into the shell's exit status and return it."""
        self.status = wait_status
        if wait_status & 0x7F == 0:
            self.status = (wait_status >> 8) & 0xFF
        elif self.child_signal == 1:
            self.status = _INTERRUPT_STATUS
        elif self.child_signal == 2:
            self.status = _QUIT_STATUS
        return self.status

    def on_child_interrupt(self) -> None:
        """Note that a running child was interrupted."""
        self.child_signal = 1
        sys.stdout.write("\n")
        sys.stdout.flush()

    def on_child_quit(self) -> None:
        """Note that a running child was asked to quit."""
        self.child_signal = 2
        sys.stdout.write("\n")
        sys.stdout.flush()