"""
Character cursor used to pick apart usage-text lines and argument tokens.
"""

from typing import Callable, Iterable

# returned by peek()/advance() once the cursor has run off the end
END = ""


class Scanner:
    """A forward-only cursor over a single string."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def __repr__(self) -> str:
        return f"Scanner({self.text!r}, pos={self.pos})"

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self, offset: int = 0) -> str:
        """Return the character `offset` places ahead without consuming it."""
        idx = self.pos + offset
        return self.text[idx] if idx < len(self.text) else END

    def advance(self) -> str:
        """Consume and return the next character."""
        ch = self.peek()
        if ch:
            self.pos += 1
        return ch

    def starts_with(self, prefix: str) -> bool:
        return self.text.startswith(prefix, self.pos)

    def skip(self, prefix: str) -> bool:
        """Consume `prefix` if the remaining text starts with it."""
        if self.starts_with(prefix):
            self.pos += len(prefix)
            return True
        return False

    def take_while(self, pred: Callable[[str], bool]) -> str:
        start = self.pos
        while not self.at_end and pred(self.text[self.pos]):
            self.pos += 1
        return self.text[start : self.pos]

    def take_until(self, stops: Iterable[str]) -> str:
        """Consume up to (not including) the first character found in `stops`."""
        stops = set(stops)
        return self.take_while(lambda c: c not in stops)

    def skip_whitespace(self) -> bool:
        """Skip whitespace; return True if anything is left afterwards."""
        self.take_while(str.isspace)
        return not self.at_end

    def rest(self) -> str:
        """Consume and return everything that is left."""
        remaining = self.text[self.pos :]
        self.pos = len(self.text)
        return remaining


def dedent(text: str) -> str:
    """
    Shift a usage block left by the indentation of its first line of content.

    The first line sets the margin, so a title indented deeper than the
    flags below it still starts in column 0. Lines indented less than the
    margin lose only their leading whitespace. Blank lines around the block
    are dropped and the result always ends with a single newline.
    """
    lines = text.splitlines()
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        return ""
    margin = len(lines[0]) - len(lines[0].lstrip())
    shifted = []
    for line in lines:
        indent = len(line) - len(line.lstrip())
        shifted.append(line[min(indent, margin) :])
    return "\n".join(shifted) + "\n"
