import pytest

from nbv.camera_model import CameraModel
from nbv.transform import Transformation


@pytest.fixture
def camera():
    """Camera with 90 degree FOV, near 1 and far 10, at the origin."""
    cam = CameraModel()
    cam.set_intrinsics_from_fov(90.0, 90.0, 1.0, 10.0)
    cam.set_camera_pose(Transformation.identity())
    return cam
