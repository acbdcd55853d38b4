"""Conversion of 0xRRGGBB colours to the pixel values of a visual."""

from __future__ import annotations

from dataclasses import dataclass

# Colours are passed through untouched on visuals at least this deep.
_DIRECT_DEPTH = 24
# Channels are widened to 16 bits before being cut to the visual's width.
_CHANNEL_BITS = 16


def _mask_layout(mask: int, channel: str) -> tuple[int, int]:
    """Return (shift, bit count) of a contiguous colour mask."""
    if mask <= 0:
        raise ValueError(f"{channel} mask must be a positive bit mask")
    shift = (mask & -mask).bit_length() - 1
    mask >>= shift
    bits = (~mask & (mask + 1)).bit_length() - 1
    return shift, bits


def _place(channel: int, bits: int, shift: int) -> int:
    drop = _CHANNEL_BITS - bits
    value = channel >> drop if drop >= 0 else channel << -drop
    return value << shift


@dataclass(frozen=True)
class PixelFormat:
    """Where each colour channel sits inside a pixel value."""

    red_shift: int
    red_bits: int
    green_shift: int
    green_bits: int
    blue_shift: int
    blue_bits: int
    depth: int = _DIRECT_DEPTH

    @classmethod
    def from_masks(
        cls, red_mask: int, green_mask: int, blue_mask: int, depth: int
    ) -> "PixelFormat":
        """Build the format described by a visual's channel masks."""
        red_shift, red_bits = _mask_layout(red_mask, "red")
        green_shift, green_bits = _mask_layout(green_mask, "green")
        blue_shift, blue_bits = _mask_layout(blue_mask, "blue")
        return cls(
            red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits, depth
        )

    def encode(self, color: int) -> int:
        """Return the pixel value for a 0xRRGGBB colour."""
        if self.depth >= _DIRECT_DEPTH:
            return color
        red = (color >> 8) & 0xFF00
        green = color & 0xFF00
        blue = (color << 8) & 0xFF00
        return (
            _place(red, self.red_bits, self.red_shift)
            + _place(green, self.green_bits, self.green_shift)
            + _place(blue, self.blue_bits, self.blue_shift)
        )