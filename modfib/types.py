from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Variant(str, Enum):
    MATRIX = "matrix"
    TABLE = "table"
    WINDOW = "window"


class Complexity(BaseModel):
    time: str
    memory: str


class Matrix2(BaseModel):
    """
    2x2 integer matrix stored as four fields, row-major: [[a, b], [c, d]].
    Values are immutable; every operation returns a new instance.
    """

    model_config = ConfigDict(frozen=True)

    a: int
    b: int
    c: int
    d: int

    def rows(self) -> tuple[tuple[int, int], tuple[int, int]]:
        return ((self.a, self.b), (self.c, self.d))
