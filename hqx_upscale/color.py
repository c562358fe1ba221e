"""
Packed 32-bit colors and the weighted blend used for every output sub-pixel.

A color is ``A<<24 | R<<16 | G<<8 | B``, so a little-endian buffer holds
the bytes in B, G, R, A order. Rasters are 2-D ``uint32`` numpy arrays.
Every function here accepts either a Python int or a numpy array and
broadcasts, so the same code serves single windows and whole rows.
"""

from dataclasses import dataclass

import numpy as np

# Bit offset of each channel inside a packed color, alpha first.
CHANNEL_SHIFTS = (24, 16, 8, 0)


def pack_color(r: int, g: int, b: int, a: int = 255) -> int:
    """Pack 8-bit channels into a single color."""
    for value in (r, g, b, a):
        if not 0 <= value <= 255:
            raise ValueError(f"Channel value out of range: {value}")
    return (a << 24) | (r << 16) | (g << 8) | b


def unpack_color(color: int) -> tuple[int, int, int, int]:
    """Split a packed color into (r, g, b, a)."""
    color = int(color)
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF, (color >> 24) & 0xFF


def pack_rgba(pixels: np.ndarray) -> np.ndarray:
    """Pack an (..., 4) RGBA uint8 array into uint32 colors."""
    pixels = np.asarray(pixels)
    if pixels.shape[-1:] != (4,):
        raise ValueError(f"Expected RGBA pixels with a trailing axis of 4, got shape {pixels.shape}")
    p = pixels.astype(np.uint32)
    return (p[..., 3] << 24) | (p[..., 0] << 16) | (p[..., 1] << 8) | p[..., 2]


def unpack_rgba(colors: np.ndarray) -> np.ndarray:
    """Inverse of pack_rgba: uint32 colors to an (..., 4) RGBA uint8 array."""
    c = np.asarray(colors, dtype=np.uint32)
    return np.stack(
        [(c >> 16) & 0xFF, (c >> 8) & 0xFF, c & 0xFF, c >> 24],
        axis=-1,
    ).astype(np.uint8)


def channels(colors) -> tuple:
    """Return (r, g, b, a) as int64 values or arrays."""
    c = np.asarray(colors, dtype=np.int64)
    return (c >> 16) & 0xFF, (c >> 8) & 0xFF, c & 0xFF, (c >> 24) & 0xFF


def mix(colors, weights, denom: int):
    """
    Weighted average of 1-3 colors, computed per channel.

    Each channel is ``(sum(w_i * ch_i)) >> log2(denom)``: the integer
    quotient, never rounded up. Weights must be non-negative and sum to
    ``denom``, which must be a power of two, so every channel stays in
    0..255.
    """
    if not 1 <= len(colors) <= 3 or len(colors) != len(weights):
        raise ValueError(f"Cannot mix {len(colors)} colors with {len(weights)} weights")
    if any(w < 0 for w in weights) or sum(weights) != denom:
        raise ValueError(f"Weights {tuple(weights)} must be non-negative and sum to {denom}")
    if denom < 1 or denom & (denom - 1):
        raise ValueError(f"Denominator must be a power of two, got {denom}")
    shift = denom.bit_length() - 1

    planes = [np.asarray(c, dtype=np.int64) for c in colors]
    result = 0
    for s in CHANNEL_SHIFTS:
        total = sum(w * ((p >> s) & 0xFF) for p, w in zip(planes, weights))
        result = result | ((total >> shift) << s)

    if np.ndim(result) == 0:
        return int(result)
    return result.astype(np.uint32)


@dataclass(frozen=True)
class Mix:
    """One output sub-pixel: window indices and their integer weights."""

    indices: tuple[int, ...]
    weights: tuple[int, ...]

    def __post_init__(self):
        if not 1 <= len(self.indices) <= 3 or len(self.indices) != len(self.weights):
            raise ValueError(f"Bad mix {self.indices} @ {self.weights}")
        if any(not 0 <= i <= 8 for i in self.indices):
            raise ValueError(f"Window index out of range in {self.indices}")
        if any(w < 0 for w in self.weights):
            raise ValueError(f"Negative weight in {self.weights}")
        denom = self.denom
        if denom < 1 or denom & (denom - 1):
            raise ValueError(f"Weights {self.weights} do not sum to a power of two")

    @property
    def denom(self) -> int:
        return sum(self.weights)

    def apply(self, window):
        if len(self.indices) == 1:
            return window[self.indices[0]]
        return mix([window[i] for i in self.indices], self.weights, self.denom)

    def __str__(self) -> str:
        if len(self.indices) == 1:
            return str(self.indices[0])
        return ",".join(map(str, self.indices)) + "@" + ":".join(map(str, self.weights))
