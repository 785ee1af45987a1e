"""Running a single exercise and resetting it."""

from __future__ import annotations

import os
import subprocess

from rich.console import Console

from rustlings.exercise import CompilationError, Exercise, Mode, RunError
from rustlings.ui import success, warn
from rustlings.verify import VerificationFailed, test


class RunFailed(Exception):
    """Raised when running or resetting an exercise fails."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"running {exercise} failed")
        self.exercise = exercise


def run(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run an exercise, or its tests, without prompting."""
    if exercise.mode is Mode.TEST:
        try:
            test(exercise, verbose)
        except VerificationFailed as err:
            raise RunFailed(exercise) from err
    else:
        _compile_and_run(exercise)


def reset(exercise: Exercise) -> None:
    """Discard local changes to the exercise with git stash."""
    try:
        subprocess.Popen(["git", "stash", "--", os.fspath(exercise.path)])
    except OSError as err:
        raise RunFailed(exercise) from err


def _compile_and_run(exercise: Exercise) -> None:
    console = Console(highlight=False, emoji=False)
    with console.status(f"Compiling {exercise}...") as status:
        try:
            compiled = exercise.compile()
        except CompilationError as err:
            status.stop()
            warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
            print(err.output.stderr)
            raise RunFailed(exercise) from err

        with compiled:
            status.update(f"Running {exercise}...")
            try:
                output = compiled.run()
            except RunError as err:
                status.stop()
                print(err.output.stdout)
                print(err.output.stderr)
                warn(f"Ran {exercise} with errors")
                raise RunFailed(exercise) from err

    print(output.stdout)
    success(f"Successfully ran {exercise}")