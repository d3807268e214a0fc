"""
Sizing model for UI components.

A sizing describes how a component occupies one axis: by fitting its
content, by a fixed size, or by filling a percentage of the space its
parent makes available.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

SizingMethod = Literal["content", "fixed", "fill"]


class Sizing(BaseModel):
    """Size declaration for a single axis."""

    model_config = ConfigDict(frozen=True)

    method: SizingMethod = "content"
    value: int = Field(default=0, ge=0)

    @classmethod
    def content(cls, padding: int = 0) -> "Sizing":
        return cls(method="content", value=padding)

    @classmethod
    def fixed(cls, value: int) -> "Sizing":
        return cls(method="fixed", value=value)

    @classmethod
    def fill(cls, percent: int) -> "Sizing":
        return cls(method="fill", value=percent)

    def resolve(self, available: int) -> int | None:
        """
        Resolve this sizing against the space available on its axis.

        Params:
            available: Space the parent makes available on this axis

        Returns:
            Resolved size, or None for content sizing which depends on layout
        """
        if self.method == "fixed":
            return self.value
        if self.method == "fill":
            return available * self.value // 100
        return None

    def __str__(self) -> str:
        return f"{self.method}({self.value})"
