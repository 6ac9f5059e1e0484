from io import StringIO
from unittest.mock import patch

from wow_guide import terminal


def test_colorize_with_tty():
    with patch("sys.stdout.isatty", return_value=True):
        result = terminal.colorize("test", terminal.Color.RED)
        assert "\033[31m" in result
        assert "test" in result
        assert "\033[0m" in result


def test_colorize_without_tty():
    with patch("sys.stdout.isatty", return_value=False):
        result = terminal.colorize("test", terminal.Color.RED)
        assert result == "test"
        assert "\033" not in result


def test_link_without_tty():
    with patch("sys.stdout.isatty", return_value=False):
        result = terminal.link("https://www.wowhead.com/item=50818", "Wowhead")
        assert result == "Wowhead (https://www.wowhead.com/item=50818)"


def test_numbered_steps():
    output = StringIO()
    with patch("sys.stdout", output):
        terminal.numbered_steps([f"Step {n}" for n in range(1, 11)])

    lines = output.getvalue().splitlines()
    assert lines[0] == "   1. Step 1"
    assert lines[9] == "  10. Step 10"


def test_error_goes_to_stderr():
    output = StringIO()
    with patch("sys.stderr", output):
        terminal.error("Something failed")

    assert "Something failed" in output.getvalue()
