# rustlings

A Python library for working with a course of small Rust exercises. Each
exercise is a `.rs` file described in an `info.toml` list. The library reads
that list and tells whether an exercise is still marked as pending. It can
also compile, run and test exercises with `rustc` and print the progress
made through the course.

## Requirements

- Python 3.11 or later
- `rustc` on your `PATH` to compile and run exercises. Exercises in
  `clippy` mode also need `cargo`.

## Installation

```
pip install .
```

## Loading exercises

`rustlings.exercise.load_exercises` parses the text of an `info.toml` file
and returns a list of `Exercise` objects. Each one has a `name`, a `path`, a
`mode` and a `hint`. The mode is a `Mode` value: `COMPILE`, `TEST` or
`CLIPPY`. The function raises `ValueError` when the list or a field is
missing.

```python
from pathlib import Path
from rustlings.exercise import load_exercises

exercises = load_exercises(Path("info.toml").read_text(encoding="utf-8"))
```

## Pending and done

An exercise counts as pending while its file contains a line that starts
with an `// I AM NOT DONE` comment. `///` also works, and case does not
matter. `contains_not_done_comment(line)` checks a single line.

`Exercise.state()` returns a `State`. When the marker is found, its
`context` holds `ContextLine` entries for the marker line, up to two lines
before it and up to two lines after it. `State.done` is true when there is
no context. `Exercise.looks_done()` is a shortcut for this.

## Compiling and running

`Exercise.compile()` calls `rustc` and writes a binary named
`temp_<pid>_<thread>` to the current directory. A `TEST` exercise is built
as a test harness. For a `CLIPPY` exercise, the method also writes
`./exercises/22_clippy/Cargo.toml` and runs `cargo clean` and
`cargo clippy` with warnings treated as errors. On failure it raises
`CompilationError`, whose `output` holds the captured `stdout` and
`stderr`. On success it returns a `CompiledExercise`. This is a context
manager that removes the binary when it closes. Its `run()` method raises
`RunError` if the program exits with a non-zero status.

```python
with exercise.compile() as compiled:
    print(compiled.run().stdout)
```

## Checking exercises

- `rustlings.verify.verify(exercises, (num_done, total), verbose, success_hints)`
  checks each exercise in order and draws a progress bar. At the first
  exercise that fails to compile, run or pass its tests, it raises
  `VerificationFailed`. It also raises `VerificationFailed` when an exercise
  passes but still carries the `I AM NOT DONE` marker. In that case it first
  prints a success message, the program output, the hint when
  `success_hints` is set, and the lines around the marker.
- `rustlings.verify.test(exercise, verbose)` compiles and runs an exercise's
  tests without asking about the marker.
- `rustlings.run.run(exercise, verbose)` compiles and runs one exercise, or
  its tests, and prints its output. It raises `RunFailed` on failure.
- `rustlings.run.reset(exercise)` starts `git stash -- <path>` for the
  exercise file. It raises `RunFailed` if git cannot be started.

Status lines come from `rustlings.ui.warn` and `rustlings.ui.success`. When
the `NO_EMOJI` environment variable is set, messages use plain symbols
instead of emoji.

## Worked solutions

`rustlings.exercises` holds worked solutions to many exercises as ordinary
Python modules:

- `basics`: conditions, strings, structs, enums and score tables
- `errors`: optional values and error handling
- `iterators`: iterator exercises
- `quizzes`: string commands and report cards
- `baskets`: fruit baskets
- `smart_pointers`: cons lists and clone-on-write data
- `traits`: generics and traits

```python
from rustlings.exercises.basics import calculate_price_of_apples
from rustlings.exercises.iterators import factorial

calculate_price_of_apples(41)  # 41
factorial(4)                   # 24
```

## What this package does not do

The package has no command-line program. It has no watch mode that checks
again when files change and no listing of exercises with their status. It
also does not generate a `rust-project.json` for rust-analyzer. Use the
functions above from your own Python code.