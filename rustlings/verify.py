"""Checking exercises in order and reporting progress."""

from __future__ import annotations

import os
from collections.abc import Iterable

from rich.console import Console
from rich.status import Status
from rich.text import Text

from rustlings.exercise import (
    CompilationError,
    CompiledExercise,
    Exercise,
    Mode,
    RunError,
)
from rustlings.ui import success, warn

_BAR_WIDTH = 60
_SEPARATOR = "===================="


class VerificationFailed(Exception):
    """Raised when an exercise fails to compile, run or pass its tests."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"verification of {exercise} failed")
        self.exercise = exercise


class _Failed(Exception):
    """An exercise failed and the failure has already been reported."""


def _console() -> Console:
    return Console(highlight=False, emoji=False)


def _draw_progress(position: int, total: int, percentage: float) -> None:
    filled = min(_BAR_WIDTH, _BAR_WIDTH * position // total) if total else _BAR_WIDTH
    head = ">" if filled < _BAR_WIDTH else ""
    rest = "-" * max(0, _BAR_WIDTH - filled - len(head))
    line = Text.assemble(
        "Progress: [",
        ("#" * filled + head, "green"),
        (rest, "red"),
        f"] {position}/{total} ({percentage:.1f} %)",
    )
    _console().print(line, soft_wrap=True)


def verify(
    exercises: Iterable[Exercise],
    progress: tuple[int, int],
    verbose: bool = False,
    success_hints: bool = False,
) -> None:
    """Check every exercise in turn, raising VerificationFailed at the first failure."""
    num_done, total = progress
    percentage = num_done / total * 100.0 if total else 100.0
    position = num_done
    _draw_progress(position, total, percentage)

    for exercise in exercises:
        try:
            if exercise.mode is Mode.TEST:
                finished = _compile_and_test(exercise, True, verbose, success_hints)
            elif exercise.mode is Mode.COMPILE:
                finished = _compile_and_run_interactively(exercise, success_hints)
            else:
                finished = _compile_only(exercise, success_hints)
        except _Failed:
            finished = False
        if not finished:
            raise VerificationFailed(exercise)

        if total:
            percentage += 100.0 / total
        position += 1
        _draw_progress(position, total, percentage)
        if position == total:
            print(
                f"Progress: You completed {position} / {total} exercises "
                f"({percentage:.1f} %)."
            )


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run the exercise's test harness without prompting."""
    try:
        _compile_and_test(exercise, False, verbose, False)
    except _Failed as err:
        raise VerificationFailed(exercise) from err


def _compile(exercise: Exercise, status: Status) -> CompiledExercise:
    try:
        return exercise.compile()
    except CompilationError as err:
        status.stop()
        warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(err.output.stderr)
        raise _Failed from err


def _compile_only(exercise: Exercise, success_hints: bool) -> bool:
    with _console().status(f"Compiling {exercise}...") as status:
        compiled = _compile(exercise, status)
    compiled.close()
    return _prompt_for_completion(exercise, None, success_hints)


def _compile_and_run_interactively(exercise: Exercise, success_hints: bool) -> bool:
    with _console().status(f"Compiling {exercise}...") as status:
        with _compile(exercise, status) as compiled:
            status.update(f"Running {exercise}...")
            try:
                output = compiled.run()
            except RunError as err:
                status.stop()
                warn(f"Ran {exercise} with errors")
                print(err.output.stdout)
                print(err.output.stderr)
                raise _Failed from err
    return _prompt_for_completion(exercise, output.stdout, success_hints)


def _compile_and_test(
    exercise: Exercise, interactive: bool, verbose: bool, success_hints: bool
) -> bool:
    with _console().status(f"Testing {exercise}...") as status:
        with _compile(exercise, status) as compiled:
            try:
                output = compiled.run()
            except RunError as err:
                status.stop()
                warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
                print(err.output.stdout)
                raise _Failed from err
    if verbose:
        print(output.stdout)
    if interactive:
        return _prompt_for_completion(exercise, None, success_hints)
    return True


def _framed(title: str, body: str) -> Text:
    return Text.assemble(
        f"{title}:\n",
        (_SEPARATOR, "bold"),
        "\n",
        body,
        "\n",
        (_SEPARATOR, "bold"),
        "\n",
    )


def _prompt_for_completion(
    exercise: Exercise, prompt_output: str | None, success_hints: bool
) -> bool:
    state = exercise.state()
    if state.done:
        return True

    if exercise.mode is Mode.COMPILE:
        success(f"Successfully ran {exercise}!")
    elif exercise.mode is Mode.TEST:
        success(f"Successfully tested {exercise}!")
    else:
        success(f"Successfully compiled {exercise}!")

    no_emoji = "NO_EMOJI" in os.environ
    messages = {
        Mode.COMPILE: "The code is compiling!",
        Mode.TEST: "The code is compiling, and the tests pass!",
        Mode.CLIPPY: (
            "The code is compiling, and Clippy is happy!"
            if no_emoji
            else "The code is compiling, and 📎 Clippy 📎 is happy!"
        ),
    }
    success_msg = messages[exercise.mode]
    if no_emoji:
        print(f"\n~*~ {success_msg} ~*~\n")
    else:
        print(f"\n🎉 🎉 {success_msg} 🎉 🎉\n")

    console = _console()
    if prompt_output is not None:
        console.print(_framed("Output", prompt_output), soft_wrap=True)
    if success_hints:
        console.print(_framed("Hints", exercise.hint), soft_wrap=True)

    print("You can keep working on this exercise,")
    console.print(
        Text.assemble(
            "or jump into the next one by removing the ",
            ("`I AM NOT DONE`", "bold"),
            " comment:",
        ),
        soft_wrap=True,
    )
    print()
    for context_line in state.context:
        console.print(
            Text.assemble(
                (f"{context_line.number:>2}", "bold blue"),
                " ",
                ("|", "blue"),
                "  ",
                (context_line.line, "bold" if context_line.important else ""),
            ),
            soft_wrap=True,
        )
    return False