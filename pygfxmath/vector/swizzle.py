"""
Swizzle selectors.

A selector either reads one component of the source vector (x/y/z/w, with
r/g/b/a as colour aliases) or injects a constant 0 or 1. Selectors can be
given as the constants below or as letters: ``v.swizzle("zyx1")``.
"""

from __future__ import annotations

from dataclasses import dataclass

from pygfxmath.core.exceptions import ValidationError


@dataclass(frozen=True)
class Swizzle:
    """One swizzle selector: a component index or a fixed constant."""
    name: str
    index: int | None = None
    constant: int | None = None

    @property
    def is_constant(self) -> bool:
        return self.constant is not None


SWIZZLE_X = Swizzle('x', index=0)
SWIZZLE_Y = Swizzle('y', index=1)
SWIZZLE_Z = Swizzle('z', index=2)
SWIZZLE_W = Swizzle('w', index=3)
SWIZZLE_ZERO = Swizzle('0', constant=0)
SWIZZLE_ONE = Swizzle('1', constant=1)
SWIZZLE_R = SWIZZLE_X
SWIZZLE_G = SWIZZLE_Y
SWIZZLE_B = SWIZZLE_Z
SWIZZLE_A = SWIZZLE_W

_BY_LETTER: dict[str, Swizzle] = {
    'x': SWIZZLE_X, 'y': SWIZZLE_Y, 'z': SWIZZLE_Z, 'w': SWIZZLE_W,
    'r': SWIZZLE_R, 'g': SWIZZLE_G, 'b': SWIZZLE_B, 'a': SWIZZLE_A,
    '0': SWIZZLE_ZERO, '1': SWIZZLE_ONE,
}


def resolve_selectors(selectors: tuple[Swizzle | str, ...]) -> tuple[Swizzle, ...]:
    """
    Expand letters into Swizzle constants.

    Args:
        selectors: Swizzle constants and/or strings of selector letters

    Returns:
        Flat tuple of Swizzle selectors

    Raises:
        ValidationError: On an unknown letter or selector type
    """
    resolved: list[Swizzle] = []
    for selector in selectors:
        if isinstance(selector, Swizzle):
            resolved.append(selector)
        elif isinstance(selector, str):
            for letter in selector:
                try:
                    resolved.append(_BY_LETTER[letter.lower()])
                except KeyError:
                    raise ValidationError(
                        f"unknown swizzle selector {letter!r}, expected one of "
                        f"{''.join(_BY_LETTER)}"
                    ) from None
        else:
            raise ValidationError(
                f"swizzle selectors must be Swizzle constants or letters, "
                f"got {type(selector).__name__}"
            )
    return tuple(resolved)
