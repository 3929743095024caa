"""Running a single exercise and resetting it."""

from __future__ import annotations

import subprocess

from rustlings.exercise import Exercise, ExerciseError, Mode
from rustlings.ui import success, warn
from rustlings.verify import VerificationError, _spinner, test


class RunError(Exception):
    """Running or resetting an exercise failed."""


def run(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run an exercise, or run its tests when it is a test exercise."""
    if exercise.mode is Mode.TEST:
        try:
            test(exercise, verbose)
        except VerificationError as err:
            raise RunError(f"Testing of {exercise} failed") from err
    else:
        _compile_and_run(exercise)


def reset(exercise: Exercise) -> subprocess.Popen:
    """Stash the changes made to the exercise file with git."""
    try:
        return subprocess.Popen(["git", "stash", "--", str(exercise.path)])
    except OSError as err:
        raise RunError(f"Could not reset {exercise}: {err}") from err


def _compile_and_run(exercise: Exercise) -> None:
    status = _spinner(f"Compiling {exercise}...")
    try:
        compiled = exercise.compile()
    except ExerciseError as err:
        status.stop()
        warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
        print(err.output.stderr)
        raise RunError(f"Compilation of {exercise} failed") from err

    status.update(f"Running {exercise}...")
    with compiled:
        try:
            output = compiled.run()
        except ExerciseError as err:
            status.stop()
            print(err.output.stdout)
            print(err.output.stderr)
            warn(f"Ran {exercise} with errors")
            raise RunError(f"Ran {exercise} with errors") from err
        finally:
            status.stop()

    print(output.stdout)
    success(f"Successfully ran {exercise}")