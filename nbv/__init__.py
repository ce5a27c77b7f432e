"""Frontier clustering and camera frustum primitives for next-best-view planning."""

from .camera_model import CameraModel
from .frontier import Frontier
from .frustum_plane import FrustumPlane
from .gain import count_visible_voxels, rank_frontiers_by_visibility
from .plane import Plane
from .transform import Transformation
from .voxel_index import VoxelIndex, decode_voxel, encode_voxel

__all__ = [
    "CameraModel",
    "Frontier",
    "FrustumPlane",
    "Plane",
    "Transformation",
    "VoxelIndex",
    "encode_voxel",
    "decode_voxel",
    "count_visible_voxels",
    "rank_frontiers_by_visibility",
]
