"""Pinhole camera frustum model for next-best-view visibility checks."""

from __future__ import annotations

import copy
import logging
import math
from typing import Dict, List, Tuple

import numpy as np

from .frustum_plane import FrustumPlane
from .plane import Plane
from .transform import Transformation

logger = logging.getLogger(__name__)

# Corner triples per face. Corners 0-3 lie on the near plane and 4-7 on the
# far plane, each quartet ordered (+h, +v), (+h, -v), (-h, -v), (-h, +v).
# The winding makes every normal point into the frustum.
PLANE_CORNERS: Dict[FrustumPlane, Tuple[int, int, int]] = {
    FrustumPlane.NEAR: (0, 2, 1),
    FrustumPlane.FAR: (4, 5, 6),
    FrustumPlane.LEFT: (3, 6, 2),
    FrustumPlane.RIGHT: (0, 5, 4),
    FrustumPlane.TOP: (3, 4, 7),
    FrustumPlane.BOTTOM: (2, 6, 5),
}

# Wireframe edges: near quad, far quad, then the four side edges.
FRUSTUM_EDGES: Tuple[Tuple[int, int], ...] = (
    (0, 1), (1, 2), (2, 3), (3, 0),
    (4, 5), (5, 6), (6, 7), (7, 4),
    (0, 4), (1, 5), (3, 7), (2, 6),
)

FAR_PLANE_CORNERS = (4, 5, 6)


class CameraModel:
    """Camera frustum expressed as six bounding planes and a global AABB.

    The camera looks along its local +X axis, with Y the horizontal and Z the
    vertical lateral axis. Intrinsics must be set once with
    :meth:`set_intrinsics_from_fov`; every pose update then recomputes the
    planes and the AABB in the global frame.

    Instances are not synchronised. Use :meth:`copy` to give each worker its
    own model when evaluating viewpoints in parallel.
    """

    def __init__(self) -> None:
        self.initialized: bool = False
        self.pose_set: bool = False
        self.T_G_C: Transformation = Transformation.identity()
        self.T_C_B: Transformation = Transformation.identity()
        self.corners_C: np.ndarray = np.empty((0, 3))
        self.corners_G: np.ndarray = np.empty((0, 3))
        self._bounding_planes: Dict[FrustumPlane, Plane] = {}
        self.aabb_min: np.ndarray = np.full(3, np.nan)
        self.aabb_max: np.ndarray = np.full(3, np.nan)
        self._warned_not_ready: bool = False

    def set_intrinsics_from_fov(
        self,
        horizontal_fov_deg: float,
        vertical_fov_deg: float,
        min_distance: float,
        max_distance: float,
    ) -> None:
        """Build the eight frustum corners in the camera frame.

        Parameters
        ----------
        horizontal_fov_deg, vertical_fov_deg : float
            Full field of view in degrees along each lateral axis.
        min_distance, max_distance : float
            Near and far clipping distances along the viewing axis.

        Values are not validated; FOV outside ``(0, 180)`` or
        ``min_distance >= max_distance`` give a degenerate frustum.
        """
        tan_half_hfov = math.tan(math.radians(horizontal_fov_deg) / 2.0)
        tan_half_vfov = math.tan(math.radians(vertical_fov_deg) / 2.0)
        logger.debug(
            "Tan half FOV: horizontal %s vertical %s", tan_half_hfov, tan_half_vfov
        )
        if not (0 < horizontal_fov_deg < 180 and 0 < vertical_fov_deg < 180) or (
            min_distance >= max_distance
        ):
            logger.debug(
                "Degenerate intrinsics: hfov=%s vfov=%s near=%s far=%s",
                horizontal_fov_deg,
                vertical_fov_deg,
                min_distance,
                max_distance,
            )

        corners = []
        for d in (min_distance, max_distance):
            h = d * tan_half_hfov
            v = d * tan_half_vfov
            corners.extend([(d, h, v), (d, h, -v), (d, -h, -v), (d, -h, v)])
        self.corners_C = np.array(corners, dtype=float)
        self.initialized = True

        if self.pose_set:
            self._calculate_bounding_planes()

    def set_extrinsics(self, T_C_B: Transformation) -> None:
        """Store the camera-to-body calibration. Does not recompute planes."""
        self.T_C_B = T_C_B

    @property
    def camera_pose(self) -> Transformation:
        return self.T_G_C

    def set_camera_pose(self, T_G_C: Transformation) -> None:
        """Set the global camera pose and recompute planes and AABB."""
        self.T_G_C = T_G_C
        self.pose_set = True
        self._calculate_bounding_planes()

    def set_body_pose(self, T_G_B: Transformation) -> None:
        """Set the pose of the body carrying the camera."""
        self.set_camera_pose(T_G_B * self.T_C_B.inverse())

    def _calculate_bounding_planes(self) -> None:
        if not self.initialized:
            return

        corners_G = self.T_G_C.apply(self.corners_C)

        planes = {}
        for face, (i, j, k) in PLANE_CORNERS.items():
            plane = Plane()
            plane.set_from_points(corners_G[i], corners_G[j], corners_G[k])
            planes[face] = plane
            logger.debug(
                "%s plane: normal %s distance %s",
                face.name.capitalize(),
                plane.normal,
                plane.distance,
            )

        self.corners_G = corners_G
        self._bounding_planes = planes
        self.aabb_min = corners_G.min(axis=0)
        self.aabb_max = corners_G.max(axis=0)
        logger.debug("AABB min %s max %s", self.aabb_min, self.aabb_max)

    @property
    def bounding_planes(self) -> List[Plane]:
        """The six planes in ``FrustumPlane`` order, global frame."""
        return [
            self._bounding_planes[face]
            for face in FrustumPlane
            if face in self._bounding_planes
        ]

    def get_plane(self, face: FrustumPlane) -> Plane:
        return self._bounding_planes[face]

    def is_ready(self) -> bool:
        """Return ``True`` once intrinsics and a pose have both been set."""
        return bool(self._bounding_planes)

    def _warn_not_ready(self) -> None:
        # Once per instance; callers gate on is_ready() in loops.
        if not self._warned_not_ready:
            logger.warning("Visibility query on a camera without intrinsics or pose")
            self._warned_not_ready = True

    def is_point_in_view(self, point) -> bool:
        """Return ``True`` if ``point`` is inside all six bounding planes.

        Returns ``False`` while no frustum has been computed yet.
        """
        if not self._bounding_planes:
            self._warn_not_ready()
            return False
        for plane in self._bounding_planes.values():
            if not plane.is_point_correct_side(point):
                return False
        return True

    def points_in_view(self, points) -> np.ndarray:
        """Boolean mask of which rows of an ``(N, 3)`` array are in view."""
        points = np.asarray(points, dtype=float).reshape(-1, 3)
        if not self._bounding_planes:
            self._warn_not_ready()
            return np.zeros(len(points), dtype=bool)
        mask = np.ones(len(points), dtype=bool)
        for plane in self._bounding_planes.values():
            mask &= plane.points_correct_side(points)
        return mask

    def get_aabb(self) -> Tuple[np.ndarray, np.ndarray]:
        """Return copies of the global AABB ``(min, max)``; NaN until ready."""
        return self.aabb_min.copy(), self.aabb_max.copy()

    def get_bounding_lines(self) -> List[np.ndarray]:
        """Return the frustum wireframe as 24 points, one pair per edge."""
        if not self._bounding_planes:
            return []
        lines = []
        for i, j in FRUSTUM_EDGES:
            lines.append(self.corners_G[i].copy())
            lines.append(self.corners_G[j].copy())
        return lines

    def get_far_plane_points(self) -> List[np.ndarray]:
        """Return three far-plane corners in the global frame."""
        if not self._bounding_planes:
            return []
        return [self.corners_G[i].copy() for i in FAR_PLANE_CORNERS]

    def copy(self) -> "CameraModel":
        return copy.deepcopy(self)
