"""Running a command line in the background and polling its output."""

import os
import shlex
import subprocess
from dataclasses import dataclass, field

_READ_SIZE = 4095


class CommandError(Exception):
    """Raised when a command can't be started or polled."""


@dataclass(frozen=True)
class CommandUpdateResult:
    """Output read in one poll, and the exit code once the command has ended."""

    exit_code: int | None = None
    output: list = field(default_factory=list)


class CommandProcess:
    """A running command whose combined stdout and stderr is read piece by piece."""

    def __init__(self, process=None):
        self._process = process
        self._running = process is not None

    @classmethod
    def run(cls, command):
        """Start ``command``; raise CommandError if it can't be started."""
        try:
            args = command if os.name == "nt" else shlex.split(command)
        except ValueError as exc:
            raise CommandError(f"could not parse command: {exc}") from exc
        if not args:
            raise CommandError("empty command")
        try:
            process = subprocess.Popen(
                args,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
            )
        except (OSError, ValueError) as exc:
            raise CommandError(f"could not start command: {exc}") from exc
        return cls(process)

    def update(self):
        """Read the next piece of output and check whether the command has ended."""
        if not self._running:
            raise CommandError("Can't update command process that's not running")

        output = []
        chunk = os.read(self._process.stdout.fileno(), _READ_SIZE)
        if chunk:
            output.append(chunk.decode(errors="replace"))

        exit_code = self._process.poll()
        if exit_code is not None:
            self._running = False
            self._process.stdout.close()
        return CommandUpdateResult(exit_code=exit_code, output=output)

    def is_running(self):
        return self._running