import numpy as np

from nbv import config


def test_camera_from_config_reads_camera_section(tmp_path):
    ini = tmp_path / "config.ini"
    ini.write_text(
        "[camera]\n"
        "horizontal_fov = 90\n"
        "vertical_fov = 90\n"
        "min_distance = 1.0\n"
        "max_distance = 8.0\n"
    )
    parser = config.load_app_config(str(ini))
    camera = config.camera_from_config(parser)
    assert camera.initialized is True
    assert np.allclose(camera.corners_C[0], [1, 1, 1])
    assert np.allclose(camera.corners_C[4], [8, 8, 8])


def test_camera_from_config_falls_back_to_defaults(tmp_path):
    ini = tmp_path / "config.ini"
    ini.write_text("[camera]\nmax_distance = 3.0\n")
    camera = config.camera_from_config(config.load_app_config(str(ini)))
    assert camera.corners_C[0][0] == config.DEFAULT_MIN_DISTANCE
    assert camera.corners_C[4][0] == 3.0


def test_missing_config_file_uses_defaults(tmp_path):
    parser = config.load_app_config(str(tmp_path / "missing.ini"))
    camera = config.camera_from_config(parser)
    assert camera.corners_C[4][0] == config.DEFAULT_MAX_DISTANCE
