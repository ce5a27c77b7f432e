"""Visible frontier voxel counts for scoring candidate viewpoints."""

import logging
from typing import List, Sequence, Tuple

import numpy as np

from . import config
from .camera_model import CameraModel
from .frontier import Frontier

logger = logging.getLogger(__name__)


def aabbs_overlap(min_a, max_a, min_b, max_b) -> bool:
    """Return ``True`` if two closed boxes share at least one point."""
    return bool(
        np.all(np.asarray(min_a) <= np.asarray(max_b))
        and np.all(np.asarray(min_b) <= np.asarray(max_a))
    )


def frontier_world_aabb(
    frontier: Frontier,
    voxel_size: float = config.DEFAULT_VOXEL_SIZE,
    origin=(0.0, 0.0, 0.0),
) -> Tuple[np.ndarray, np.ndarray]:
    """Return the world-space box spanned by the frontier's voxel cells."""
    origin = np.asarray(origin, dtype=float)
    idx_min, idx_max = frontier.get_aabb()
    return origin + idx_min * voxel_size, origin + (idx_max + 1) * voxel_size


def count_visible_voxels(
    camera: CameraModel,
    frontier: Frontier,
    voxel_size: float = config.DEFAULT_VOXEL_SIZE,
    origin=(0.0, 0.0, 0.0),
) -> int:
    """Count the frontier voxels whose centres lie inside the camera frustum.

    Parameters
    ----------
    camera : CameraModel
        Camera with intrinsics and pose set.
    frontier : Frontier
        Cluster to test.
    voxel_size : float, optional
        Edge length of a voxel in metres.
    origin : array-like, optional
        World coordinate of voxel ``(0, 0, 0)``'s lower corner.

    Returns
    -------
    int
        Number of visible voxels. ``0`` when the frontier is empty, the
        camera is not ready, or the two boxes do not overlap.
    """
    if len(frontier) == 0 or not camera.is_ready():
        return 0

    cam_min, cam_max = camera.get_aabb()
    ftr_min, ftr_max = frontier_world_aabb(frontier, voxel_size, origin)
    if not aabbs_overlap(cam_min, cam_max, ftr_min, ftr_max):
        return 0

    centers = frontier.voxel_centers(voxel_size, origin)
    return int(np.count_nonzero(camera.points_in_view(centers)))


def rank_frontiers_by_visibility(
    camera: CameraModel,
    frontiers: Sequence[Frontier],
    voxel_size: float = config.DEFAULT_VOXEL_SIZE,
    origin=(0.0, 0.0, 0.0),
) -> List[Tuple[int, int]]:
    """Return ``(index, visible_count)`` pairs, most visible first.

    Ties keep the input order.
    """
    counts = [
        (idx, count_visible_voxels(camera, frontier, voxel_size, origin))
        for idx, frontier in enumerate(frontiers)
    ]
    counts.sort(key=lambda item: item[1], reverse=True)
    logger.debug("Frontier visibility ranking: %s", counts)
    return counts
