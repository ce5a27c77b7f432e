"""Frontier voxel clusters with an incrementally maintained bounding box."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional, Set, Tuple

import numpy as np

from . import config
from .voxel_index import (
    VoxelIndex,
    as_voxel_index,
    decode_voxel,
    encode_voxel,
    face_neighbour_keys,
    in_key_range,
    voxel_to_point,
)

logger = logging.getLogger(__name__)

_EMPTY_MIN = np.iinfo(np.int64).max
_EMPTY_MAX = np.iinfo(np.int64).min


class Frontier:
    """A cluster of frontier voxels.

    Voxels are stored as packed integer keys (see
    :func:`nbv.voxel_index.encode_voxel`). The AABB is minimal after every
    add. Removing a voxel only marks it stale; the minimal box is rebuilt on
    the next :meth:`get_aabb` or adjacency test. Removal never checks that
    the remaining voxels are still connected.

    Merging is up to the caller: copy one cluster into another with
    :meth:`add_frontier` and drop the source.
    """

    def __init__(self, seed_voxel: Optional[VoxelIndex] = None, rng=None) -> None:
        """Create a cluster, optionally seeded with one voxel.

        Args:
            seed_voxel: First voxel of the cluster.
            rng: ``numpy.random.Generator`` or integer seed used to pick the
                display colour. A fresh unseeded generator if omitted.
        """
        self._keys: Set[int] = set()
        self._aabb_min = np.full(3, _EMPTY_MIN, dtype=np.int64)
        self._aabb_max = np.full(3, _EMPTY_MAX, dtype=np.int64)
        self._aabb_dirty = False

        generator = np.random.default_rng(rng)
        r, g, b = generator.uniform(0.0, 1.0, size=3)
        self.color: Tuple[float, float, float, float] = (
            float(r),
            float(g),
            float(b),
            config.FRONTIER_COLOR_ALPHA,
        )

        if seed_voxel is not None:
            self.add_voxel(seed_voxel)

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[VoxelIndex]:
        return (decode_voxel(key) for key in self._keys)

    def __contains__(self, voxel) -> bool:
        return self.has_voxel(voxel)

    @property
    def voxels(self) -> Set[VoxelIndex]:
        """A new set holding the member voxels."""
        return {decode_voxel(key) for key in self._keys}

    def has_voxel(self, voxel) -> bool:
        voxel = as_voxel_index(voxel)
        if not in_key_range(voxel):
            return False
        return encode_voxel(voxel) in self._keys

    def _grow_aabb(self, voxel: VoxelIndex) -> None:
        for i in range(3):
            if voxel[i] < self._aabb_min[i]:
                self._aabb_min[i] = voxel[i]
            if voxel[i] > self._aabb_max[i]:
                self._aabb_max[i] = voxel[i]

    def add_voxel(self, voxel) -> None:
        """Insert ``voxel`` and extend the AABB to cover it."""
        voxel = as_voxel_index(voxel)
        self._keys.add(encode_voxel(voxel))
        self._grow_aabb(voxel)

    def add_frontier(self, voxels: Iterable) -> None:
        """Insert every voxel of ``voxels`` (another ``Frontier`` works too).

        Min and max are updated independently on each axis for each voxel,
        exactly as repeated :meth:`add_voxel` calls would.
        """
        for voxel in voxels:
            self.add_voxel(voxel)

    def remove_voxel(self, voxel) -> None:
        """Erase ``voxel`` if present; the AABB is rebuilt lazily."""
        voxel = as_voxel_index(voxel)
        if not in_key_range(voxel):
            return
        key = encode_voxel(voxel)
        if key in self._keys:
            self._keys.discard(key)
            self._aabb_dirty = True

    def _recompute_aabb(self) -> None:
        self._aabb_min.fill(_EMPTY_MIN)
        self._aabb_max.fill(_EMPTY_MAX)
        for key in self._keys:
            self._grow_aabb(decode_voxel(key))
        self._aabb_dirty = False
        logger.debug(
            "Recomputed frontier AABB over %d voxels: %s %s",
            len(self._keys),
            self._aabb_min,
            self._aabb_max,
        )

    def get_aabb(self) -> Tuple[np.ndarray, np.ndarray]:
        """Return copies of the minimal ``(aabb_min, aabb_max)``.

        An empty cluster returns INT64 max as min and INT64 min as max.
        """
        if self._aabb_dirty:
            self._recompute_aabb()
        return self._aabb_min.copy(), self._aabb_max.copy()

    def check_intersection_aabb(self, other: "Frontier") -> bool:
        """Return ``True`` if some voxel of ``self`` is face-adjacent to one of ``other``.

        Phase 1 compares the boxes. The pair goes on to the exact test only
        if, on every axis ``i``::

            self_min[i] - 1 <= other_max[i] and other_min[i] - 1 <= self_max[i]

        i.e. the per-axis "within one voxel" conditions are combined with
        AND, and any single axis with a gap of more than one voxel rejects
        the pair.

        Phase 2 looks up the six face neighbours of each voxel of ``self`` in
        ``other``.
        """
        if not self._keys or not other._keys:
            return False

        self_min, self_max = self.get_aabb()
        other_min, other_max = other.get_aabb()
        near = np.logical_and(self_min - 1 <= other_max, other_min - 1 <= self_max)
        if not near.all():
            return False

        for key in self._keys:
            for neighbour in face_neighbour_keys(decode_voxel(key)):
                if neighbour in other._keys:
                    return True
        return False

    def voxel_centers(
        self,
        voxel_size: float = config.DEFAULT_VOXEL_SIZE,
        origin=(0.0, 0.0, 0.0),
    ) -> np.ndarray:
        """Return an ``(N, 3)`` array of voxel centres in world coordinates."""
        if not self._keys:
            return np.empty((0, 3))
        indices = np.array([decode_voxel(key) for key in self._keys], dtype=float)
        return voxel_to_point(indices, voxel_size, origin)

    def __repr__(self) -> str:
        return f"Frontier(voxels={len(self._keys)})"
