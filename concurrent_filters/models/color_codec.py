"""
Packing helpers for 24-bit RGB pixels.

A packed pixel is 0xRRGGBB: red in the most significant byte, blue in the
least significant one.
"""
from __future__ import annotations
from typing import Tuple
import numpy as np

CHANNEL_MASK = 0xFF
PIXEL_MASK = 0xFFFFFF
CHANNEL_SHIFTS = (16, 8, 0)  # R, G, B


def unpack(pixel: int) -> Tuple[int, int, int]:
    """Split a packed pixel into its (r, g, b) channel samples."""
    pixel = int(pixel)
    return (
        (pixel >> 16) & CHANNEL_MASK,
        (pixel >> 8) & CHANNEL_MASK,
        pixel & CHANNEL_MASK,
    )


def pack(r: int, g: int, b: int) -> int:
    """Inverse of unpack(). Channels are masked to 8 bits."""
    return (
        ((int(r) & CHANNEL_MASK) << 16)
        | ((int(g) & CHANNEL_MASK) << 8)
        | (int(b) & CHANNEL_MASK)
    )


# ─── Whole-array variants (I/O boundary) ─────────────────────────────
def pack_array(rgb: np.ndarray) -> np.ndarray:
    """
    (H, W, 3) uint8 RGB  →  (H, W) uint32 packed grid.
    """
    if rgb.ndim != 3 or rgb.shape[2] != 3:
        raise ValueError(f"Expected an (H, W, 3) array, got shape {rgb.shape}")
    wide = rgb.astype(np.uint32)
    return (wide[:, :, 0] << 16) | (wide[:, :, 1] << 8) | wide[:, :, 2]


def unpack_array(packed: np.ndarray) -> np.ndarray:
    """
    (H, W) packed grid  →  (H, W, 3) uint8 RGB, C-contiguous.
    """
    if packed.ndim != 2:
        raise ValueError(f"Expected an (H, W) array, got shape {packed.shape}")
    wide = packed.astype(np.uint32)
    return np.ascontiguousarray(
        np.stack([(wide >> shift) & CHANNEL_MASK for shift in CHANNEL_SHIFTS], axis=-1)
        .astype(np.uint8)
    )


def channel_planes(packed: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Three (H, W) uint8 planes (R, G, B) of a packed grid."""
    wide = packed.astype(np.uint32)
    return tuple(((wide >> shift) & CHANNEL_MASK).astype(np.uint8) for shift in CHANNEL_SHIFTS)
