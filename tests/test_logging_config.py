import logging

import numpy as np
import pytest

from nbv.camera_model import CameraModel
from nbv.frontier import Frontier
from nbv.logging_config import MODULE_LOG_PREFIXES, default_module_logs, setup_logging


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    module_loggers = [logging.getLogger(name) for name in MODULE_LOG_PREFIXES]
    saved_root = (root.level, list(root.handlers))
    saved_propagate = [lg.propagate for lg in module_loggers]
    yield
    for lg in [root] + module_loggers:
        for handler in list(lg.handlers):
            handler.close()
            lg.removeHandler(handler)
    root.setLevel(saved_root[0])
    for handler in saved_root[1]:
        root.addHandler(handler)
    for lg, propagate in zip(module_loggers, saved_propagate):
        lg.propagate = propagate
        lg.setLevel(logging.NOTSET)


def _flush_all():
    for name in [None] + list(MODULE_LOG_PREFIXES):
        for handler in logging.getLogger(name).handlers:
            handler.flush()


def test_setup_logging_writes_module_log(tmp_path, restore_logging):
    log_dir = tmp_path / "logs"
    setup_logging(
        log_file="nbv.log",
        level=logging.DEBUG,
        module_logs={"nbv.frontier": "frontier.log"},
        log_dir=str(log_dir),
    )
    frontier = Frontier((0, 0, 0), rng=0)
    frontier.add_voxel((1, 0, 0))
    frontier.remove_voxel((1, 0, 0))
    frontier.get_aabb()
    logging.getLogger("nbv.test").info("global entry")
    _flush_all()

    frontier_log = (log_dir / "frontier.log").read_text(encoding="utf-8")
    global_log = (log_dir / "nbv.log").read_text(encoding="utf-8")
    assert "Recomputed frontier AABB" in frontier_log
    assert "[nbv.frontier]" in frontier_log
    assert "Recomputed frontier AABB" not in global_log
    assert "global entry" in global_log


def test_default_module_logs_are_timestamped():
    assert default_module_logs("20260101_120000") == {
        "nbv.frontier": "frontier_20260101_120000.log",
        "nbv.camera_model": "camera_model_20260101_120000.log",
    }


def test_setup_logging_defaults_split_frontier_and_camera(tmp_path, restore_logging):
    log_dir = tmp_path / "logs"
    setup_logging(level=logging.DEBUG, log_dir=str(log_dir), timestamp="20260101_120000")

    camera = CameraModel()
    camera.points_in_view(np.zeros((1, 3)))
    frontier = Frontier((0, 0, 0), rng=0)
    frontier.remove_voxel((0, 0, 0))
    frontier.get_aabb()
    _flush_all()

    assert sorted(p.name for p in log_dir.iterdir()) == [
        "camera_model_20260101_120000.log",
        "default_log_20260101_120000.log",
        "frontier_20260101_120000.log",
    ]
    camera_log = (log_dir / "camera_model_20260101_120000.log").read_text(encoding="utf-8")
    frontier_log = (log_dir / "frontier_20260101_120000.log").read_text(encoding="utf-8")
    assert "without intrinsics or pose" in camera_log
    assert "Recomputed frontier AABB" in frontier_log


def test_empty_module_logs_keep_everything_in_global_file(tmp_path, restore_logging):
    log_dir = tmp_path / "logs"
    setup_logging(log_file="all.log", module_logs={}, log_dir=str(log_dir))
    CameraModel().is_point_in_view((0, 0, 0))
    _flush_all()

    assert [p.name for p in log_dir.iterdir()] == ["all.log"]
    assert "without intrinsics or pose" in (log_dir / "all.log").read_text(encoding="utf-8")
