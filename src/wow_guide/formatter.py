"""
Presentation formatting for generated guide text.

Model output is untrusted free text, so it is markup-escaped before anything
else. Each non-empty line then becomes one list entry, with leading
``1.``-style numbers and ``-``/``•`` bullets stripped.
"""

import re

_MARKUP_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
}
_MARKUP_PATTERN = re.compile(r"[&<>\"']")
_NUMBERED_PATTERN = re.compile(r"^\d+\.\s*")
_BULLET_PATTERN = re.compile(r"^[-•]\s*")


def escape_markup(text: str) -> str:
    return _MARKUP_PATTERN.sub(lambda m: _MARKUP_ESCAPES[m.group(0)], text)


def split_guide_steps(text: str) -> list[str]:
    """Split guide text into steps without escaping. Only for non-markup output."""
    steps = []
    for raw_line in (text or "").splitlines():
        line = raw_line.strip()
        if not line:
            continue
        if _NUMBERED_PATTERN.match(line):
            line = _NUMBERED_PATTERN.sub("", line, count=1)
        elif _BULLET_PATTERN.match(line):
            line = _BULLET_PATTERN.sub("", line, count=1)
        steps.append(line)
    return steps


def format_guide_steps(text: str) -> list[str]:
    return split_guide_steps(escape_markup(text or ""))


def render_guide_html(text: str) -> str:
    items = "".join(f"<li>{step}</li>" for step in format_guide_steps(text))
    return f"<ol>{items}</ol>"
