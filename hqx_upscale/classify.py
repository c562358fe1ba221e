"""
Perceptual "is this neighbor different?" test.

Colors are converted to integer luma/chroma (Y, U, V) plus alpha and two
colors are different when any of those channels differs by more than its
threshold. Two conversions are available:

- ``A``: BT.601 style coefficients scaled to integers.
- ``B``: the cheaper shift-only weighting of the first hq filters.
"""

from dataclasses import dataclass, fields

import numpy as np

from .color import channels


@dataclass(frozen=True)
class Thresholds:
    """Maximum tolerated per-channel distance (Y, U, V, A)."""

    y: int = 0x30
    u: int = 0x07
    v: int = 0x06
    a: int = 0x50

    def __post_init__(self):
        for field in fields(self):
            value = getattr(self, field.name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 0:
                raise ValueError(f"Threshold {field.name} must be a non-negative integer, got {value!r}")

    def shifted(self) -> tuple[int, int, int, int]:
        """Thresholds moved into their AYUV byte lanes (Y<<16, U<<8, V, A<<24)."""
        return int(self.y) << 16, int(self.u) << 8, int(self.v), int(self.a) << 24


DEFAULT_THRESHOLDS = Thresholds()


class Classifier:
    """Base distance test; subclasses supply the YUV conversion."""

    mode = None

    def to_yuva(self, colors) -> tuple:
        raise NotImplementedError

    def is_different(self, color1, color2, thresholds: Thresholds = DEFAULT_THRESHOLDS):
        """
        True where color1 and color2 are perceptually different.

        Bitwise equal colors are never different. Returns a bool for
        scalar input and a boolean array for array input.
        """
        c1 = np.asarray(color1, dtype=np.int64)
        c2 = np.asarray(color2, dtype=np.int64)
        y1, u1, v1, a1 = self.to_yuva(c1)
        y2, u2, v2, a2 = self.to_yuva(c2)

        differs = (
            (np.abs(y1 - y2) > thresholds.y)
            | (np.abs(u1 - u2) > thresholds.u)
            | (np.abs(v1 - v2) > thresholds.v)
            | (np.abs(a1 - a2) > thresholds.a)
        )
        differs = differs & (c1 != c2)

        if np.ndim(differs) == 0:
            return bool(differs)
        return differs

    __call__ = is_different

    def __repr__(self) -> str:
        return f"{type(self).__name__}(mode={self.mode!r})"


class Bt601Classifier(Classifier):
    mode = "A"

    def to_yuva(self, colors) -> tuple:
        r, g, b, a = channels(colors)
        y = (299 * r + 587 * g + 114 * b) // 1000
        u = (-169 * r - 331 * g + 500 * b) // 1000 + 128
        v = (500 * r - 419 * g - 81 * b) // 1000 + 128
        return y, u, v, a


class ShiftClassifier(Classifier):
    mode = "B"

    def to_yuva(self, colors) -> tuple:
        r, g, b, a = channels(colors)
        y = (r + g + b) >> 2
        u = 128 + ((r - b) >> 2)
        v = 128 + ((2 * g - r - b) >> 3)
        return y, u, v, a


CLASSIFIERS = {
    "A": Bt601Classifier(),
    "B": ShiftClassifier(),
}


def get_classifier(mode: "str | Classifier") -> Classifier:
    """Resolve a mode letter ("A" or "B") or pass a Classifier through."""
    if isinstance(mode, Classifier):
        return mode
    try:
        return CLASSIFIERS[str(mode).upper()]
    except KeyError:
        raise ValueError(f"Unknown classifier mode {mode!r}, expected one of {sorted(CLASSIFIERS)}") from None


def is_different(color1, color2, thresholds: Thresholds = DEFAULT_THRESHOLDS, mode: "str | Classifier" = "A"):
    """Module-level shortcut for ``get_classifier(mode).is_different(...)``."""
    return get_classifier(mode).is_different(color1, color2, thresholds)
