import subprocess

import pytest

from rustlings.exercise import Exercise, Mode
from rustlings.run import RunFailed, reset, run

PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
FINISHED = "fn main() {\n}\n"


class FakeToolchain:
    def __init__(self):
        self.compile_fails = False
        self.run_fails = False
        self.run_stdout = ""
        self.calls = []

    def __call__(self, cmd, *args, **kwargs):
        cmd = [str(part) for part in cmd]
        self.calls.append(cmd)
        if cmd[0] in ("rustc", "cargo"):
            if self.compile_fails:
                return subprocess.CompletedProcess(cmd, 1, b"", b"error: bad syntax")
            return subprocess.CompletedProcess(cmd, 0, b"", b"")
        code = 1 if self.run_fails else 0
        return subprocess.CompletedProcess(cmd, code, self.run_stdout.encode(), b"panicked here")


@pytest.fixture
def toolchain(monkeypatch):
    fake = FakeToolchain()
    monkeypatch.setattr(subprocess, "run", fake)
    return fake


def make(tmp_path, name, text, mode=Mode.COMPILE):
    path = tmp_path / f"{name}.rs"
    path.write_text(text)
    return Exercise(name=name, path=path, mode=mode, hint="Hello!")


def test_compile_success_prints_output(tmp_path, toolchain, capsys):
    toolchain.run_stdout = "hello from the binary"
    exercise = make(tmp_path, "compSuccess", FINISHED)
    run(exercise)
    out = capsys.readouterr().out
    assert "hello from the binary" in out
    assert f"Successfully ran {exercise}" in out
    assert "--test" not in toolchain.calls[0]


def test_compile_failure_raises(tmp_path, toolchain, capsys):
    toolchain.compile_fails = True
    exercise = make(tmp_path, "compFailure", FINISHED)
    with pytest.raises(RunFailed) as info:
        run(exercise)
    assert info.value.exercise == exercise
    assert "error: bad syntax" in capsys.readouterr().out


def test_run_failure_raises(tmp_path, toolchain, capsys):
    toolchain.run_fails = True
    exercise = make(tmp_path, "crash", FINISHED)
    with pytest.raises(RunFailed):
        run(exercise)
    out = capsys.readouterr().out
    assert "panicked here" in out
    assert f"Ran {exercise} with errors" in out


def test_compile_exercise_does_not_prompt(tmp_path, toolchain, capsys):
    exercise = make(tmp_path, "pending_exercise", PENDING)
    run(exercise)
    assert "I AM NOT DONE" not in capsys.readouterr().out


def test_test_exercise_does_not_prompt(tmp_path, toolchain, capsys):
    exercise = make(tmp_path, "pending_test_exercise", PENDING, mode=Mode.TEST)
    run(exercise)
    assert "I AM NOT DONE" not in capsys.readouterr().out
    assert "--test" in toolchain.calls[0]


@pytest.mark.parametrize("verbose", [True, False])
def test_nocapture_controls_output(tmp_path, toolchain, capsys, verbose):
    toolchain.run_stdout = "THIS TEST TOO SHALL PASS"
    exercise = make(tmp_path, "testSuccess", FINISHED, mode=Mode.TEST)
    run(exercise, verbose)
    assert ("THIS TEST TOO SHALL PASS" in capsys.readouterr().out) is verbose


def test_test_failure_raises(tmp_path, toolchain):
    toolchain.run_fails = True
    exercise = make(tmp_path, "testNotPassed", FINISHED, mode=Mode.TEST)
    with pytest.raises(RunFailed):
        run(exercise)


def test_reset_stashes_the_file(tmp_path, monkeypatch):
    launched = []
    monkeypatch.setattr(subprocess, "Popen", lambda args, **kwargs: launched.append(args))
    exercise = make(tmp_path, "intro1", FINISHED)
    reset(exercise)
    assert launched == [["git", "stash", "--", str(exercise.path)]]


def test_reset_fails_without_git(tmp_path, monkeypatch):
    def missing(args, **kwargs):
        raise FileNotFoundError("git")

    monkeypatch.setattr(subprocess, "Popen", missing)
    exercise = make(tmp_path, "intro1", FINISHED)
    with pytest.raises(RunFailed) as info:
        reset(exercise)
    assert info.value.exercise == exercise