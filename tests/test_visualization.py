import plotly.graph_objects as go

from nbv.camera_model import CameraModel
from nbv.frontier import Frontier
from nbv.visualization import (
    build_figure,
    frontier_trace,
    frustum_trace,
    save_figure_html,
)


def test_frustum_trace_has_one_segment_per_edge(camera):
    trace = frustum_trace(camera)
    assert isinstance(trace, go.Scatter3d)
    assert len(trace.x) == 36
    assert list(trace.x).count(None) == 12


def test_frontier_trace_uses_cluster_colour():
    frontier = Frontier((1, 2, 3), rng=5)
    trace = frontier_trace(frontier, voxel_size=1.0)
    assert list(trace.x) == [1.5]
    assert trace.marker.color.startswith("rgba(")
    assert trace.marker.color.endswith(", 0.5)")


def test_build_figure_skips_empty_frontiers_and_unready_camera(camera):
    frontiers = [Frontier((0, 0, 0), rng=1), Frontier(rng=2), Frontier((5, 0, 0), rng=3)]
    fig = build_figure(camera, frontiers, voxel_size=1.0)
    assert len(fig.data) == 3

    fig = build_figure(CameraModel(), frontiers, voxel_size=1.0)
    assert len(fig.data) == 2


def test_save_figure_html(tmp_path, camera):
    fig = build_figure(camera)
    out = save_figure_html(fig, tmp_path / "reports" / "frustum.html")
    assert out.exists()
    assert "plotly" in out.read_text(encoding="utf-8").lower()
