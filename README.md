# rustlings

A Python library for working through collections of small Rust exercises. It
loads an exercise list, compiles each exercise with `rustc`, runs it or its
test harness, or lints it with Clippy. It also tells whether an exercise is
still pending.

An exercise counts as pending for as long as its source still holds an
`// I AM NOT DONE` comment. Remove that comment when you are happy with your
solution, and the exercise counts as done.

## Installation

```
pip install .
```

Compiling and running exercises needs a Rust toolchain on your `PATH`: `rustc`,
and `cargo` for the Clippy exercises.

## The exercise list

The list is a TOML file:

```toml
[[exercises]]
name = "intro1"
path = "exercises/00_intro/intro1.rs"
mode = "compile"
hint = "Remove the I AM NOT DONE comment to move on."
```

`mode` takes one of three values:

- `compile`: build a binary and run it.
- `test`: build the test harness and run it with `--show-output`.
- `clippy`: write `./exercises/22_clippy/Cargo.toml`, build the exercise, then
  run `cargo clippy` with warnings treated as errors.

Load the file with `rustlings.exercise.load_exercises`:

```python
from rustlings.exercise import load_exercises

exercises = load_exercises("info.toml")
```

## Checking exercises

`Exercise.state()` reads the source. It returns a `State` whose `done` is true
once the marker is gone. While the marker is still there, `context` holds the
lines around it as `ContextLine(line, number, important)` values.
`Exercise.looks_done()` is a shortcut for `state().done`.

`Exercise.compile()` returns a `CompiledExercise`. It is a context manager that
removes the temporary binary on exit or on `close()`. Its `run()` returns an
`ExerciseOutput(stdout, stderr)`. A failed compile or run raises
`ExerciseError`, and its `output` attribute holds what the command printed.
Binaries go to `./temp_<pid>_<thread>` in the current directory.

```python
from rustlings.exercise import ExerciseError

exercise = exercises[0]
try:
    with exercise.compile() as compiled:
        print(compiled.run().stdout)
except ExerciseError as err:
    print(err.output.stderr)
```

`rustlings.verify.verify(exercises, (num_done, total), verbose, success_hints)`
checks the exercises in order and draws a progress bar on standard error. It
raises `VerificationError` at the first exercise that fails to compile, fails
its run, or still carries the marker. The error's `exercise` attribute names
that exercise. For a pending exercise it prints the success message and the
lines around the marker. It prints the hint as well when `success_hints` is
true.

```python
from rustlings.verify import VerificationError, verify

try:
    verify(exercises, (0, len(exercises)))
except VerificationError as err:
    print(err.exercise.hint)
```

`rustlings.verify.test(exercise, verbose)` runs a test exercise without
checking for the marker.

`rustlings.run.run(exercise, verbose)` compiles and runs one exercise, or runs
its tests. It raises `RunError` on failure. `rustlings.run.reset(exercise)`
starts `git stash -- <path>` and returns the process.

Set `NO_EMOJI` in the environment to get plain-text markers instead of emoji.

## Worked solutions

The `rustlings.solutions` package holds reference solutions to a selection of
exercises, written as ordinary Python. Failures are raised as exceptions. The
modules are `basics`, `collections`, `errors`, `iterators` and `quizzes`.

```python
from rustlings.solutions.quizzes import calculate_price_of_apples
from rustlings.solutions.errors import parse_pos_nonzero
from rustlings.solutions.iterators import divide

calculate_price_of_apples(41)   # 41
parse_pos_nonzero("42")         # PositiveNonzeroInteger(value=42)
divide(81, 9)                   # 9
```

## What this package does not do

- There is no command-line program. Exercises are checked by calling the
  functions above from Python.
- There is no watch mode that re-checks exercises when their files change.
- It does not write a `rust-project.json` for rust-analyzer.
- The conversion exercises have no worked solutions.

## Running the tests

```
pip install ".[test]"
pytest
```