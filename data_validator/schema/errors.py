"""Violation report accumulation.

An ErrorCollector holds an ordered list of human-readable violation lines.
Sub-reports are merged in with ``concat``, which nests them by two spaces
under an introduction line.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

INDENT = "  "


class ErrorCollector(BaseModel):
    """Ordered collection of violation messages.

    Attributes:
        introduction: Optional heading printed above the indented lines.
        errors: Violation lines in the order they were recorded.
    """

    introduction: str = ""
    errors: list[str] = Field(default_factory=list)

    def add(self, error: str) -> None:
        """Append a single violation line."""
        self.errors.append(error)

    def concat(self, introduction: str, incoming: ErrorCollector) -> None:
        """Append another collector's lines, nested one level.

        Args:
            introduction: Summary line for the incoming set of errors.
            incoming: Collector whose lines are copied, each prefixed by
                two spaces.
        """
        self.add(introduction)
        self.errors.extend(INDENT + error for error in incoming.errors)

    def has_errors(self) -> bool:
        return bool(self.errors)

    def render(self) -> str:
        """Render the report as text."""
        if not self.introduction:
            return "\n".join(self.errors)
        return self.introduction + "\n" + INDENT + ("\n" + INDENT).join(self.errors)

    def __str__(self) -> str:
        return self.render()
