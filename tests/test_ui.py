import pytest

from rustlings.ui import success, warn


@pytest.fixture(autouse=True)
def _plain_output(monkeypatch):
    monkeypatch.delenv("FORCE_COLOR", raising=False)


def test_warn_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    warn("Ran exercises/intro.rs with errors")
    assert capsys.readouterr().out == "! Ran exercises/intro.rs with errors\n"


def test_success_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    success("Successfully ran exercises/intro.rs")
    assert capsys.readouterr().out == "✓ Successfully ran exercises/intro.rs\n"


def test_warn_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    warn("broken")
    assert capsys.readouterr().out == "⚠️  broken\n"


def test_success_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    success("fine")
    assert capsys.readouterr().out == "✅  fine\n"


def test_brackets_are_printed_verbatim(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    warn("[bold]not markup[/bold]")
    assert "[bold]not markup[/bold]" in capsys.readouterr().out


def test_long_message_is_not_wrapped(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    message = "word " * 40
    success(message)
    out = capsys.readouterr().out
    assert out.count("\n") == 1
    assert out.startswith("✓ ")