"""Running external commands built up argument by argument."""

from __future__ import annotations

import subprocess

_NOT_FOUND_STATUS = 127


class Command:
    """An external program together with its arguments."""

    def __init__(self, executable: str) -> None:
        self.executable = executable
        self._args: list[str] = []

    def add_arg(self, *args: str) -> "Command":
        """Append one or more arguments and return the command for chaining."""
        self._args.extend(args)
        return self

    def argv(self) -> list[str]:
        """The full argument vector, program first."""
        return [self.executable, *self._args]

    def run(self) -> int:
        """Run the command and return its exit status.

        A program that cannot be found yields status 127, as a shell would.
        """
        try:
            return subprocess.run(self.argv(), check=False).returncode
        except FileNotFoundError:
            return _NOT_FOUND_STATUS

    def __repr__(self) -> str:
        return f"Command({self.argv()!r})"


def command(executable: str) -> Command:
    """Start building a command for ``executable``."""
    return Command(executable)