"""Running external commands and recording their outcome."""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass, field
from typing import IO


@dataclass
class Command:
    """An external command to run, with the record of its attempts."""

    name: str = ""
    args: list[str] = field(default_factory=list)
    dir: str = ""
    out: IO | None = None
    err: IO | None = None
    stdin: IO | None = None
    env: dict[str, str] = field(default_factory=dict)
    errors: list[Exception] = field(default_factory=list)
    attempts: int = 0

    def set_env_variable(self, name: str, value: str) -> None:
        """Set an environment variable for the command."""
        self.env[name] = value

    def did_error(self) -> bool:
        """Return True if any attempt failed."""
        return bool(self.errors)

    def did_fail(self) -> bool:
        """Return True if every attempt failed."""
        return len(self.errors) == self.attempts

    def last_error(self) -> Exception | None:
        """Return the most recent error, if any."""
        return self.errors[-1] if self.errors else None

    def __str__(self) -> str:
        env_part = "".join(f"{k}={v} " for k, v in self.env.items())
        return env_part + " ".join([self.name, *self.args])


class CommandError(Exception):
    """A command could not be run or exited unsuccessfully."""

    def __init__(self, command: Command, output: str = "", cause: BaseException | None = None):
        super().__init__(command, output, cause)
        self.command = command
        self.output = output
        self.cause = cause

    def __str__(self) -> str:
        sanitised = list(self.command.args)
        for index, arg in enumerate(sanitised):
            if "password" in arg.lower() and index < len(sanitised) - 1:
                sanitised[index + 1] = "*****"
        return (
            f"failed to run '{self.command.name} {' '.join(sanitised)}' command in "
            f"directory '{self.command.dir}', output: '{self.output}'"
        )


def _fileno(stream: IO | None) -> int | None:
    if stream is None:
        return None
    try:
        return stream.fileno()
    except (AttributeError, OSError, ValueError):
        return None


def _decode(data: bytes | None) -> str:
    return (data or b"").decode("utf-8", errors="replace")


def _write(stream: IO, data: bytes) -> None:
    if not data:
        return
    try:
        stream.write(_decode(data))
    except TypeError:
        stream.write(data)


class DefaultCommandRunner:
    """Runs commands as child processes."""

    def run_without_retry(self, command: Command) -> str:
        """Run the command once, record the attempt and return its trimmed output."""
        try:
            return self._run(command)
        except CommandError as exc:
            command.errors.append(exc)
            raise
        finally:
            command.attempts += 1

    def _run(self, command: Command) -> str:
        env = None
        if command.env:
            env = dict(os.environ)
            env.update(command.env)

        stdin_arg = None
        input_data = None
        if command.stdin is not None:
            stdin_fd = _fileno(command.stdin)
            if stdin_fd is not None:
                stdin_arg = stdin_fd
            else:
                data = command.stdin.read()
                input_data = data.encode("utf-8") if isinstance(data, str) else data

        out_fd = _fileno(command.out)
        err_fd = _fileno(command.err)

        if command.out is not None:
            stdout_arg = out_fd if out_fd is not None else subprocess.PIPE
        else:
            stdout_arg = subprocess.PIPE

        if command.err is not None:
            stderr_arg = err_fd if err_fd is not None else subprocess.PIPE
        elif command.out is None:
            stderr_arg = subprocess.STDOUT
        else:
            stderr_arg = None

        try:
            completed = subprocess.run(
                [command.name, *command.args],
                cwd=command.dir or None,
                env=env,
                stdin=stdin_arg,
                input=input_data,
                stdout=stdout_arg,
                stderr=stderr_arg,
                check=False,
            )
        except OSError as exc:
            raise CommandError(command, "", exc) from exc

        if command.err is not None and err_fd is None:
            _write(command.err, completed.stderr)

        if command.out is not None:
            if out_fd is None:
                _write(command.out, completed.stdout)
            if completed.returncode != 0:
                cause = subprocess.CalledProcessError(completed.returncode, completed.args)
                raise CommandError(command, "", cause)
            return ""

        text = _decode(completed.stdout).strip()
        if completed.returncode != 0:
            cause = subprocess.CalledProcessError(completed.returncode, completed.args)
            raise CommandError(command, text, cause)
        return text