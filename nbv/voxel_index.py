"""Voxel index helpers: canonical integer keys and voxel/world conversion."""

import operator
from typing import Iterable, Sequence, Tuple

import numpy as np

from . import config

VoxelIndex = Tuple[int, int, int]

KEY_BITS = config.VOXEL_KEY_BITS
KEY_OFFSET = 1 << (KEY_BITS - 1)
KEY_MASK = (1 << KEY_BITS) - 1
MIN_COORD = -KEY_OFFSET
MAX_COORD = KEY_OFFSET - 1

# 6-connected neighbour offsets, one axis at a time.
FACE_NEIGHBOURS = (
    (1, 0, 0),
    (-1, 0, 0),
    (0, 1, 0),
    (0, -1, 0),
    (0, 0, 1),
    (0, 0, -1),
)


def as_voxel_index(voxel: Sequence[int]) -> VoxelIndex:
    """Return ``voxel`` as a plain tuple of three Python ints.

    Raises
    ------
    ValueError
        If ``voxel`` does not have exactly three components, or a component
        is not an integer (floats are rejected, not truncated).
    """
    if len(voxel) != 3:
        raise ValueError(f"Voxel index must have 3 components, got {len(voxel)}")
    try:
        return operator.index(voxel[0]), operator.index(voxel[1]), operator.index(voxel[2])
    except TypeError:
        raise ValueError(
            f"Voxel index components must be integers, got {tuple(voxel)}"
        ) from None


def in_key_range(voxel: VoxelIndex) -> bool:
    """Return ``True`` if every coordinate fits in the packed key."""
    return all(MIN_COORD <= c <= MAX_COORD for c in voxel)


def encode_voxel(voxel: Sequence[int]) -> int:
    """Pack a signed voxel index into one non-negative integer key.

    Each coordinate is shifted by ``KEY_OFFSET`` and stored in its own
    ``KEY_BITS`` wide field, x in the high bits and z in the low bits.

    Raises
    ------
    ValueError
        If the index is malformed or a coordinate is outside
        ``[MIN_COORD, MAX_COORD]``.
    """
    x, y, z = as_voxel_index(voxel)
    if not in_key_range((x, y, z)):
        raise ValueError(
            f"Voxel {(x, y, z)} outside encodable range [{MIN_COORD}, {MAX_COORD}]"
        )
    return (
        ((x + KEY_OFFSET) << (2 * KEY_BITS))
        | ((y + KEY_OFFSET) << KEY_BITS)
        | (z + KEY_OFFSET)
    )


def decode_voxel(key: int) -> VoxelIndex:
    """Invert :func:`encode_voxel`."""
    x = ((key >> (2 * KEY_BITS)) & KEY_MASK) - KEY_OFFSET
    y = ((key >> KEY_BITS) & KEY_MASK) - KEY_OFFSET
    z = (key & KEY_MASK) - KEY_OFFSET
    return x, y, z


def face_neighbour_keys(voxel: VoxelIndex) -> Iterable[int]:
    """Yield keys of the 6 face neighbours of ``voxel`` that are encodable."""
    x, y, z = voxel
    for dx, dy, dz in FACE_NEIGHBOURS:
        neighbour = (x + dx, y + dy, z + dz)
        if in_key_range(neighbour):
            yield encode_voxel(neighbour)


def voxel_to_point(voxel, voxel_size: float, origin=(0.0, 0.0, 0.0)) -> np.ndarray:
    """Return the world coordinate of a voxel centre."""
    origin = np.asarray(origin, dtype=float)
    return origin + (np.asarray(voxel, dtype=float) + 0.5) * voxel_size


def point_to_voxel(point, voxel_size: float, origin=(0.0, 0.0, 0.0)) -> VoxelIndex:
    """Return the index of the voxel containing ``point``."""
    origin = np.asarray(origin, dtype=float)
    idx = np.floor((np.asarray(point, dtype=float) - origin) / voxel_size)
    return as_voxel_index(idx.astype(np.int64))
