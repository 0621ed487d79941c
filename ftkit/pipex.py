"""Run two commands joined by a pipe, from an input file to an output file."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from ftkit.textops import split

Environment = Union[Mapping[str, str], Iterable[str]]

_NOT_FOUND_STATUS = 127
_FAILURE_STATUS = 1


class CommandNotFoundError(LookupError):
    """No executable for the command was found on the search path."""

    def __init__(self, command: str) -> None:
        super().__init__(f"command not found: {command}")
        self.command = command


def get_path_variable(env: Environment) -> Optional[str]:
    """Return the value of PATH from a mapping or from ``NAME=value`` entries."""
    if isinstance(env, Mapping):
        return env.get("PATH")
    for entry in env:
        if entry.startswith("PATH="):
            return entry[len("PATH=") :]
    return None


def resolve_command(directories: Optional[Sequence[str]], command: Optional[str]) -> Optional[str]:
    """Return the first ``directory/command`` that is executable, or None."""
    if not directories or not command:
        return None
    for directory in directories:
        candidate = f"{directory}/{command}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def _env_dict(env: Optional[Environment]) -> Dict[str, str]:
    if env is None:
        return dict(os.environ)
    if isinstance(env, Mapping):
        return dict(env)
    result: Dict[str, str] = {}
    for entry in env:
        name, sep, value = entry.partition("=")
        if sep:
            result[name] = value
    return result


def _report(name: str, exc: OSError) -> None:
    sys.stderr.write(f"{name}: {exc.strerror or exc}\n")


def _locate(command: str, env: Mapping[str, str]) -> Optional[Tuple[str, List[str]]]:
    """Find the program for ``command``; None when there is no PATH at all."""
    path_value = get_path_variable(env)
    if path_value is None:
        return None
    args = split(command, " ")
    program = resolve_command(split(path_value, ":"), args[0] if args else None)
    if program is None:
        raise CommandNotFoundError(command)
    return program, args


def _launch(
    command: str, stdin: int, stdout: int, env: Mapping[str, str]
) -> Union["subprocess.Popen[bytes]", int]:
    """Start ``command``, or return the exit status its failure stands for."""
    try:
        found = _locate(command, env)
    except CommandNotFoundError:
        sys.stderr.write("command not found\n")
        return _NOT_FOUND_STATUS
    if found is None:
        return _NOT_FOUND_STATUS
    program, args = found
    try:
        return subprocess.Popen(args, executable=program, stdin=stdin, stdout=stdout, env=dict(env))
    except OSError as exc:
        _report("execve", exc)
        return _FAILURE_STATUS


def _start_stage(
    path: str, flags: int, command: str, pipe_end: int, reads_file: bool, env: Mapping[str, str]
) -> Union["subprocess.Popen[bytes]", int]:
    try:
        fd = os.open(path, flags, 0o644)
    except OSError as exc:
        _report(path, exc)
        return _FAILURE_STATUS
    try:
        if reads_file:
            return _launch(command, fd, pipe_end, env)
        return _launch(command, pipe_end, fd, env)
    finally:
        os.close(fd)


def _wait(stage: Union["subprocess.Popen[bytes]", int]) -> int:
    if isinstance(stage, int):
        return stage
    code = stage.wait()
    # A command ended by a signal reports no exit code of its own.
    return code if code >= 0 else 0


def run_pipeline(
    infile: str, first: str, second: str, outfile: str, env: Optional[Environment] = None
) -> int:
    """Run ``first < infile | second > outfile`` and return the second's status.

    Commands are split on spaces and looked up only through the PATH of
    ``env`` (the process environment by default). The output file is
    created or truncated with mode 0644.
    """
    env_map = _env_dict(env)
    try:
        read_end, write_end = os.pipe()
    except OSError as exc:
        _report("pipe", exc)
        return _FAILURE_STATUS
    try:
        producer = _start_stage(infile, os.O_RDONLY, first, write_end, True, env_map)
        consumer = _start_stage(
            outfile, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, second, read_end, False, env_map
        )
    finally:
        os.close(read_end)
        os.close(write_end)
    _wait(producer)
    return _wait(consumer)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry: ``infile cmd1 cmd2 outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        sys.stdout.write("Error: Invalid number of arguments\n")
        return _FAILURE_STATUS
    infile, first, second, outfile = args
    return run_pipeline(infile, first, second, outfile)


if __name__ == "__main__":
    sys.exit(main())