"""Seeded two-dimensional OpenSimplex gradient noise."""

from __future__ import annotations

import math

_STRETCH = (1.0 / math.sqrt(3.0) - 1.0) / 2.0
_SQUISH = (math.sqrt(3.0) - 1.0) / 2.0
_NORM = 47.0

_GRADIENTS = (
    5, 2, 2, 5,
    -5, 2, -2, 5,
    5, -2, 2, -5,
    -5, -2, -2, -5,
)

_MASK64 = (1 << 64) - 1
_MULTIPLIER = 6364136223846793005
_INCREMENT = 1442695040888963407


def _lcg(state: int) -> int:
    return (state * _MULTIPLIER + _INCREMENT) & _MASK64


def _signed(value: int) -> int:
    value &= _MASK64
    return value - (1 << 64) if value >= 1 << 63 else value


def _truncated_mod(value: int, modulus: int) -> int:
    remainder = abs(value) % modulus
    return -remainder if value < 0 else remainder


def _permutation(seed: int) -> tuple[int, ...]:
    source = list(range(256))
    perm = [0] * 256
    state = seed & _MASK64
    for _ in range(3):
        state = _lcg(state)
    for i in reversed(range(256)):
        state = _lcg(state)
        r = _truncated_mod(_signed(state + 31), i + 1)
        if r < 0:
            r += i + 1
        perm[i] = source[r]
        source[r] = source[i]
    return tuple(perm)


class OpenSimplex:
    """Smooth gradient noise in two dimensions, reproducible for a given seed."""

    def __init__(self, seed: int = 0) -> None:
        self.seed = seed
        self._perm = _permutation(seed)

    def _extrapolate(self, xsb: int, ysb: int, dx: float, dy: float) -> float:
        index = self._perm[(self._perm[xsb & 0xFF] + ysb) & 0xFF] & 0x0E
        return _GRADIENTS[index] * dx + _GRADIENTS[index + 1] * dy

    def _contribution(self, xsb: int, ysb: int, dx: float, dy: float) -> float:
        attn = 2.0 - dx * dx - dy * dy
        if attn <= 0.0:
            return 0.0
        attn *= attn
        return attn * attn * self._extrapolate(xsb, ysb, dx, dy)

    def get(self, x: float, y: float) -> float:
        """Return the noise value at ``(x, y)``, roughly within [-1, 1]."""
        stretch = (x + y) * _STRETCH
        xs = x + stretch
        ys = y + stretch
        xsb = math.floor(xs)
        ysb = math.floor(ys)
        squish = (xsb + ysb) * _SQUISH
        xb = xsb + squish
        yb = ysb + squish
        xins = xs - xsb
        yins = ys - ysb
        in_sum = xins + yins
        dx0 = x - xb
        dy0 = y - yb

        value = self._contribution(xsb + 1, ysb, dx0 - 1.0 - _SQUISH, dy0 - _SQUISH)
        value += self._contribution(xsb, ysb + 1, dx0 - _SQUISH, dy0 - 1.0 - _SQUISH)

        if in_sum <= 1.0:
            zins = 1.0 - in_sum
            if zins > xins or zins > yins:
                if xins > yins:
                    xsv_ext, ysv_ext = xsb + 1, ysb - 1
                    dx_ext, dy_ext = dx0 - 1.0, dy0 + 1.0
                else:
                    xsv_ext, ysv_ext = xsb - 1, ysb + 1
                    dx_ext, dy_ext = dx0 + 1.0, dy0 - 1.0
            else:
                xsv_ext, ysv_ext = xsb + 1, ysb + 1
                dx_ext = dx0 - 1.0 - 2.0 * _SQUISH
                dy_ext = dy0 - 1.0 - 2.0 * _SQUISH
        else:
            zins = 2.0 - in_sum
            if zins < xins or zins < yins:
                if xins > yins:
                    xsv_ext, ysv_ext = xsb + 2, ysb
                    dx_ext = dx0 - 2.0 - 2.0 * _SQUISH
                    dy_ext = dy0 - 2.0 * _SQUISH
                else:
                    xsv_ext, ysv_ext = xsb, ysb + 2
                    dx_ext = dx0 - 2.0 * _SQUISH
                    dy_ext = dy0 - 2.0 - 2.0 * _SQUISH
            else:
                xsv_ext, ysv_ext = xsb, ysb
                dx_ext, dy_ext = dx0, dy0
            xsb += 1
            ysb += 1
            dx0 = dx0 - 1.0 - 2.0 * _SQUISH
            dy0 = dy0 - 1.0 - 2.0 * _SQUISH

        value += self._contribution(xsb, ysb, dx0, dy0)
        value += self._contribution(xsv_ext, ysv_ext, dx_ext, dy_ext)
        return value / _NORM