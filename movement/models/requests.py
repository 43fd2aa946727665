"""API request models."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field

from movement.utils.point import Point

# Pointer coordinates are signed 32-bit screen positions
Coordinate = Annotated[int, Field(ge=-(2**31), le=2**31 - 1)]


class ClassifyRequest(BaseModel):
    points: list[tuple[Coordinate, Coordinate]] = Field(
        ...,
        description="Trace samples as [x, y] pairs in capture order",
    )

    def to_trace(self) -> list[Point]:
        return [Point.from_pair(p) for p in self.points]
