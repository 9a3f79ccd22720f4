"""Data models for template expansion."""

from pydantic import BaseModel, Field


class Macro(BaseModel):
    """Represents a macro found in a template."""

    name: str  # The macro name (e.g., "version")
    syntax: str  # Original syntax (e.g., "{version}")
    start_pos: int = 0  # Position in template where macro starts
    end_pos: int = 0  # Position in template where macro ends


class ExpansionResult(BaseModel):
    """Result of expanding a template."""

    original: str  # Original template
    expanded: str  # Expanded text
    resolved: list[str] = Field(default_factory=list)  # Names resolved at any depth
    unresolved: list[str] = Field(default_factory=list)  # Names left verbatim

    @property
    def complete(self) -> bool:
        """True if every macro encountered was resolved."""
        return not self.unresolved
