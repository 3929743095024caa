"""Compiling, running and checking exercises in order."""

from __future__ import annotations

from typing import Iterable

from rich.console import Console
from rich.status import Status
from rich.text import Text

from rustlings.exercise import CompiledExercise, Exercise, ExerciseError, Mode
from rustlings.ui import no_emoji, success, warn

_BAR_WIDTH = 60
_SEPARATOR = "===================="


class VerificationError(Exception):
    """An exercise failed to compile, failed its run or is still pending."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"{exercise} has not been verified")
        self.exercise = exercise


class _ProgressBar:
    """A textual progress bar drawn on standard error."""

    def __init__(self, position: int, total: int) -> None:
        self.position = position
        self.total = total
        self._console = Console(stderr=True, highlight=False, soft_wrap=True)
        self._render()

    def advance(self) -> None:
        self.position += 1
        self._render()

    def _render(self) -> None:
        if self.total:
            percentage = self.position / self.total * 100.0
            filled = min(_BAR_WIDTH, _BAR_WIDTH * self.position // self.total)
        else:
            percentage = 100.0
            filled = _BAR_WIDTH
        done_part = "#" * filled
        rest = ""
        if filled < _BAR_WIDTH:
            done_part += ">"
            rest = "-" * (_BAR_WIDTH - filled - 1)
        line = Text.assemble(
            "Progress: [",
            (done_part, "green"),
            (rest, "red"),
            f"] {self.position}/{self.total} ({percentage:.1f} %)",
        )
        self._console.print(line)


def _spinner(message: str) -> Status:
    status = Console(stderr=True).status(message, spinner="dots")
    status.start()
    return status


def _print_styled(text: Text) -> None:
    Console(highlight=False, soft_wrap=True, emoji=False).print(text)


def _separator() -> None:
    _print_styled(Text(_SEPARATOR, style="bold"))


def _compile(exercise: Exercise, status: Status) -> CompiledExercise:
    try:
        return exercise.compile()
    except ExerciseError as err:
        status.stop()
        warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(err.output.stderr)
        raise


def _compile_only(exercise: Exercise, success_hints: bool) -> bool:
    status = _spinner(f"Compiling {exercise}...")
    compiled = _compile(exercise, status)
    compiled.close()
    status.stop()
    return prompt_for_completion(exercise, None, success_hints)


def _compile_and_run_interactively(exercise: Exercise, success_hints: bool) -> bool:
    status = _spinner(f"Compiling {exercise}...")
    with _compile(exercise, status) as compiled:
        status.update(f"Running {exercise}...")
        try:
            output = compiled.run()
        except ExerciseError as err:
            status.stop()
            warn(f"Ran {exercise} with errors")
            print(err.output.stdout)
            print(err.output.stderr)
            raise
        finally:
            status.stop()
    return prompt_for_completion(exercise, output.stdout, success_hints)


def _compile_and_test(
    exercise: Exercise, interactive: bool, verbose: bool, success_hints: bool
) -> bool:
    status = _spinner(f"Testing {exercise}...")
    with _compile(exercise, status) as compiled:
        try:
            output = compiled.run()
        except ExerciseError as err:
            status.stop()
            warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
            print(err.output.stdout)
            raise
        finally:
            status.stop()
    if verbose:
        print(output.stdout)
    if interactive:
        return prompt_for_completion(exercise, None, success_hints)
    return True


def verify(
    exercises: Iterable[Exercise],
    progress: tuple[int, int],
    verbose: bool = False,
    success_hints: bool = False,
) -> None:
    """Check each exercise in turn; raise VerificationError at the first failure."""
    num_done, total = progress
    bar = _ProgressBar(num_done, total)
    for exercise in exercises:
        try:
            if exercise.mode is Mode.TEST:
                passed = _compile_and_test(exercise, True, verbose, success_hints)
            elif exercise.mode is Mode.COMPILE:
                passed = _compile_and_run_interactively(exercise, success_hints)
            else:
                passed = _compile_only(exercise, success_hints)
        except ExerciseError as err:
            raise VerificationError(exercise) from err
        if not passed:
            raise VerificationError(exercise)
        bar.advance()


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run the test harness of an exercise without prompting."""
    try:
        _compile_and_test(exercise, False, verbose, False)
    except ExerciseError as err:
        raise VerificationError(exercise) from err


def prompt_for_completion(
    exercise: Exercise, prompt_output: str | None, success_hints: bool
) -> bool:
    """Return True for a finished exercise; otherwise show where the marker is."""
    state = exercise.state()
    if state.done:
        return True

    if exercise.mode is Mode.COMPILE:
        success(f"Successfully ran {exercise}!")
    elif exercise.mode is Mode.TEST:
        success(f"Successfully tested {exercise}!")
    else:
        success(f"Successfully compiled {exercise}!")

    emoji_off = no_emoji()
    if exercise.mode is Mode.COMPILE:
        success_msg = "The code is compiling!"
    elif exercise.mode is Mode.TEST:
        success_msg = "The code is compiling, and the tests pass!"
    elif emoji_off:
        success_msg = "The code is compiling, and Clippy is happy!"
    else:
        success_msg = "The code is compiling, and 📎 Clippy 📎 is happy!"

    print()
    if emoji_off:
        print(f"~*~ {success_msg} ~*~")
    else:
        print(f"🎉 🎉  {success_msg} 🎉 🎉")
    print()

    if prompt_output is not None:
        print("Output:")
        _separator()
        print(prompt_output)
        _separator()
        print()
    if success_hints:
        print("Hints:")
        _separator()
        print(exercise.hint)
        _separator()
        print()

    print("You can keep working on this exercise,")
    _print_styled(
        Text.assemble(
            "or jump into the next one by removing the ",
            ("`I AM NOT DONE`", "bold"),
            " comment:",
        )
    )
    print()
    for context_line in state.context or ():
        _print_styled(
            Text.assemble(
                (f"{context_line.number:>2}", "bold blue"),
                " ",
                ("|", "blue"),
                "  ",
                (context_line.line, "bold" if context_line.important else ""),
            )
        )
    return False