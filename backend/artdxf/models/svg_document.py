"""Parsed SVG document model."""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, Field


class SvgElement(BaseModel):
    """One element: local tag name, attributes, ordered children."""

    tag: str
    attributes: dict[str, str] = Field(default_factory=dict)
    children: list[SvgElement] = Field(default_factory=list)

    def get(self, name: str) -> str | None:
        return self.attributes.get(name)

    def iter(self) -> Iterator[SvgElement]:
        """Pre-order walk over this element and all descendants."""
        yield self
        for child in self.children:
            yield from child.iter()


class SvgDocument(BaseModel):
    """Represents a parsed SVG file. Empty input has no children."""

    children: list[SvgElement] = Field(default_factory=list)

    @property
    def root(self) -> SvgElement | None:
        return self.children[0] if self.children else None

    def iter(self) -> Iterator[SvgElement]:
        for child in self.children:
            yield from child.iter()
