"""Exercise descriptions, their completion state and compilation."""

from __future__ import annotations

import enum
import itertools
import os
import re
import subprocess
import threading
import tomllib
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

RUSTC_COLOR_ARGS = ("--color", "always")
RUSTC_EDITION_ARGS = ("--edition", "2021")
RUSTC_NO_DEBUG_ARGS = ("-C", "strip=debuginfo")
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/22_clippy/Cargo.toml"

_NOT_DONE = re.compile(r"[ \t]*///?[ \t]*I AM NOT DONE", re.IGNORECASE | re.ASCII)


def contains_not_done_comment(line: str) -> bool:
    """Tell whether a line starts with the "I AM NOT DONE" comment."""
    return _NOT_DONE.match(line) is not None


def _temp_file() -> str:
    """A temporary executable name unique to this process and thread."""
    return f"./temp_{os.getpid()}_{threading.get_ident()}"


def _rustc_flags() -> list[str]:
    return [*RUSTC_COLOR_ARGS, *RUSTC_EDITION_ARGS, *RUSTC_NO_DEBUG_ARGS]


def _decode_line(raw: bytes) -> str:
    if raw.endswith(b"\n"):
        raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
    return raw.decode("utf-8")


class Mode(enum.Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the "I AM NOT DONE" marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Completion state: done when there is no pending context."""

    context: tuple[ContextLine, ...] = ()

    @property
    def done(self) -> bool:
        return not self.context


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a finished process."""

    stdout: str
    stderr: str


class _ExerciseFailure(Exception):
    def __init__(self, output: ExerciseOutput, message: str) -> None:
        super().__init__(message)
        self.output = output


class CompilationError(_ExerciseFailure):
    """Raised when an exercise fails to compile."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output, "compilation failed")


class RunError(_ExerciseFailure):
    """Raised when a compiled exercise exits unsuccessfully."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output, "run failed")


def _output_of(result: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(
        stdout=(result.stdout or b"").decode("utf-8", errors="replace"),
        stderr=(result.stderr or b"").decode("utf-8", errors="replace"),
    )


def _clean(executable: Path) -> None:
    try:
        executable.unlink(missing_ok=True)
    except OSError:
        pass


class CompiledExercise:
    """A successfully compiled exercise; removes its binary when closed."""

    def __init__(self, exercise: Exercise, executable: str | os.PathLike[str]) -> None:
        self.exercise = exercise
        self.executable = Path(executable)

    def run(self) -> ExerciseOutput:
        """Run the binary, raising RunError if it fails."""
        arg = "--show-output" if self.exercise.mode is Mode.TEST else ""
        result = subprocess.run(
            [os.fspath(self.executable), arg],
            capture_output=True,
            check=False,
        )
        output = _output_of(result)
        if result.returncode != 0:
            raise RunError(output)
        return output

    def close(self) -> None:
        """Remove the compiled binary."""
        _clean(self.executable)

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


@dataclass(frozen=True)
class Exercise:
    """One exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str

    def __str__(self) -> str:
        return os.fspath(self.path)

    def _write_clippy_manifest(self) -> None:
        manifest = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2021"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(manifest, encoding="utf-8")
        except OSError as err:
            if "NO_EMOJI" in os.environ:
                message = "Failed to write Clippy Cargo.toml file."
            else:
                message = "Failed to write 📎 Clippy 📎 Cargo.toml file."
            raise OSError(message) from err

    def compile(self) -> CompiledExercise:
        """Compile the exercise, raising CompilationError on failure."""
        executable = _temp_file()
        source = os.fspath(self.path)
        if self.mode is Mode.COMPILE:
            command = ["rustc", source, "-o", executable, *_rustc_flags()]
            result = subprocess.run(command, capture_output=True, check=False)
        elif self.mode is Mode.TEST:
            command = ["rustc", "--test", source, "-o", executable, *_rustc_flags()]
            result = subprocess.run(command, capture_output=True, check=False)
        else:
            self._write_clippy_manifest()
            quiet = {
                "stdin": subprocess.DEVNULL,
                "stdout": subprocess.DEVNULL,
                "stderr": subprocess.DEVNULL,
                "check": False,
            }
            # Build a binary too so that clippy exercises can be run afterwards.
            subprocess.run(["rustc", source, "-o", executable, *_rustc_flags()], **quiet)
            # A clean build is needed for clippy to report every lint.
            subprocess.run(
                ["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS],
                **quiet,
            )
            result = subprocess.run(
                [
                    "cargo",
                    "clippy",
                    "--manifest-path",
                    CLIPPY_CARGO_TOML_PATH,
                    *RUSTC_COLOR_ARGS,
                    "--",
                    "-D",
                    "warnings",
                    "-D",
                    "clippy::float_cmp",
                ],
                capture_output=True,
                check=False,
            )

        if result.returncode == 0:
            return CompiledExercise(self, executable)
        _clean(Path(executable))
        raise CompilationError(_output_of(result))

    def state(self) -> State:
        """Find the "I AM NOT DONE" marker and the lines around it."""
        with open(self.path, "rb") as source:
            return self._scan(source)

    def _scan(self, source: BinaryIO) -> State:
        previous: deque[str] = deque(maxlen=CONTEXT)
        for number, raw in enumerate(source, start=1):
            line = _decode_line(raw)
            if not contains_not_done_comment(line):
                previous.append(line)
                continue

            first = number - len(previous)
            context = [
                ContextLine(text, first + offset, False)
                for offset, text in enumerate(previous)
            ]
            context.append(ContextLine(line, number, True))
            for offset, following in enumerate(itertools.islice(source, CONTEXT), start=1):
                try:
                    text = _decode_line(following)
                except UnicodeDecodeError:
                    break
                context.append(ContextLine(text, number + offset, False))
            return State(tuple(context))
        return State()

    def looks_done(self) -> bool:
        """Whether the marker comment has been removed."""
        return self.state().done


def load_exercises(text: str) -> list[Exercise]:
    """Parse the exercise list from the contents of info.toml."""
    data = tomllib.loads(text)
    entries = data.get("exercises")
    if not isinstance(entries, list):
        raise ValueError("info.toml has no list of exercises")
    exercises = []
    for entry in entries:
        try:
            exercises.append(
                Exercise(
                    name=str(entry["name"]),
                    path=Path(entry["path"]),
                    mode=Mode(entry["mode"]),
                    hint=str(entry["hint"]),
                )
            )
        except KeyError as missing:
            raise ValueError(f"exercise is missing the {missing} field") from None
    return exercises