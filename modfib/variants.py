from __future__ import annotations

import logging
from collections.abc import Callable

from .fibonacci import MOD, fibonacci_mod, fibonacci_table, fibonacci_window
from .types import Complexity, Variant

logger = logging.getLogger(__name__)

FibFn = Callable[[int, int], int]


class VariantRegistry:
    def __init__(self):
        self._variants: dict[Variant, tuple[FibFn, Complexity]] = {}

    def register(self, variant: Variant, fn: FibFn, complexity: Complexity) -> None:
        if variant in self._variants:
            raise ValueError(f"Variant already registered: {variant.value}")
        self._variants[variant] = (fn, complexity)

    def _key(self, variant: Variant | str) -> Variant:
        if isinstance(variant, Variant):
            key = variant
        else:
            try:
                key = Variant(variant.lower())
            except ValueError:
                raise KeyError(variant) from None
        if key not in self._variants:
            raise KeyError(key.value)
        return key

    def get(self, variant: Variant | str) -> FibFn:
        return self._variants[self._key(variant)][0]

    def complexity(self, variant: Variant | str) -> Complexity:
        return self._variants[self._key(variant)][1]

    def list(self) -> list[str]:
        return sorted(v.value for v in self._variants)


def default_registry() -> VariantRegistry:
    reg = VariantRegistry()
    reg.register(Variant.MATRIX, fibonacci_mod, Complexity(time="O(log n)", memory="O(1)"))
    reg.register(Variant.TABLE, fibonacci_table, Complexity(time="O(n)", memory="O(n)"))
    reg.register(Variant.WINDOW, fibonacci_window, Complexity(time="O(n)", memory="O(1)"))
    return reg


# ── program boundary: one integer in, one integer out ─────────────────────────────
def parse_index(text: str) -> int:
    """Parse n from the first line of `text`."""
    lines = text.splitlines()
    line = lines[0].strip() if lines else ""
    if not line:
        raise ValueError("expected an integer index, got empty input")
    try:
        return int(line)
    except ValueError:
        raise ValueError(f"expected an integer index, got {line!r}") from None


def format_result(value: int) -> str:
    return f"{value}\n"


def solve(
    text: str,
    variant: Variant | str = Variant.MATRIX,
    *,
    modulus: int = MOD,
    registry: VariantRegistry | None = None,
) -> str:
    reg = registry or default_registry()
    fn = reg.get(variant)
    n = parse_index(text)
    logger.debug("solve: variant=%s n=%d modulus=%d", variant, n, modulus)
    return format_result(fn(n, modulus))


__all__ = [
    "VariantRegistry",
    "default_registry",
    "format_result",
    "parse_index",
    "solve",
]
