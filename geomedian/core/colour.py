"""Colour conversions: hex <-> RGBA, and RGBA -> comparison samples.

Two colour spaces are in play:
  - straight 8-bit RGBA, as Pillow reads and writes it (hex options,
    report output, marker colour);
  - samples: 16-bit alpha-premultiplied RGBA, the space pixels are
    compared in. Every fully transparent pixel is (0, 0, 0, 0) there,
    whatever RGB it carries.
"""

import re

import numpy as np

RGBA = tuple[int, int, int, int]

MAX_16 = 0xFFFF

_HEX_RE = re.compile(r'^[0-9a-fA-F]+$')


def hex_to_rgba(hex_str: str) -> RGBA:
    """Parse '#rgb', '#rrggbb' or '#rrggbbaa' (leading '#' optional).

    Alpha defaults to 255. Raises ValueError on anything else.
    """
    h = hex_str.strip().lstrip('#')
    if not _HEX_RE.match(h) or len(h) not in (3, 6, 8):
        raise ValueError(f'Invalid hex colour: {hex_str!r}')
    if len(h) == 3:
        h = ''.join(c * 2 for c in h)
    if len(h) == 6:
        h += 'ff'
    return (int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16), int(h[6:8], 16))


def rgba_to_hex(rgba: RGBA) -> str:
    r, g, b, a = rgba
    return f'#{r:02x}{g:02x}{b:02x}{a:02x}'


def premultiply(rgba: RGBA) -> RGBA:
    """Straight 8-bit RGBA -> 16-bit premultiplied sample.

    Each channel is widened to 16 bits (c * 0x101) and scaled by a / 0xff.
    """
    r, g, b, a = (int(c) for c in rgba)
    return (r * 0x101 * a // 0xFF, g * 0x101 * a // 0xFF, b * 0x101 * a // 0xFF, a * 0x101)


def premultiply_array(arr: np.ndarray) -> np.ndarray:
    """premultiply() over an H x W x 4 uint8 array. Returns int64."""
    wide = arr.astype(np.int64)
    alpha = wide[..., 3:4]
    out = np.empty_like(wide)
    out[..., :3] = wide[..., :3] * 0x101 * alpha // 0xFF
    out[..., 3:] = alpha * 0x101
    return out
