"""Plotly builders for camera frustums and frontier clusters."""

from pathlib import Path
from typing import Iterable, Optional

import plotly.graph_objects as go

from . import config
from .camera_model import CameraModel
from .frontier import Frontier


def _rgba(color) -> str:
    r, g, b, a = color
    return f"rgba({int(r * 255)}, {int(g * 255)}, {int(b * 255)}, {a})"


def frustum_trace(
    camera: CameraModel, name: str = "frustum", color: str = "orange"
) -> go.Scatter3d:
    """Return the frustum wireframe as one line trace.

    Each edge of :meth:`CameraModel.get_bounding_lines` is drawn as a
    separate segment, split with ``None`` gaps.
    """
    lines = camera.get_bounding_lines()
    xs, ys, zs = [], [], []
    for start, end in zip(lines[0::2], lines[1::2]):
        xs.extend([start[0], end[0], None])
        ys.extend([start[1], end[1], None])
        zs.extend([start[2], end[2], None])
    return go.Scatter3d(
        x=xs,
        y=ys,
        z=zs,
        mode="lines",
        name=name,
        line=dict(color=color),
    )


def frontier_trace(
    frontier: Frontier,
    voxel_size: float = config.DEFAULT_VOXEL_SIZE,
    origin=(0.0, 0.0, 0.0),
    name: Optional[str] = None,
) -> go.Scatter3d:
    """Return the voxel centres of ``frontier`` as markers in its colour."""
    centers = frontier.voxel_centers(voxel_size, origin)
    return go.Scatter3d(
        x=centers[:, 0],
        y=centers[:, 1],
        z=centers[:, 2],
        mode="markers",
        name=name or f"frontier ({len(frontier)})",
        marker=dict(size=3, color=_rgba(frontier.color)),
    )


def build_figure(
    camera: Optional[CameraModel] = None,
    frontiers: Iterable[Frontier] = (),
    voxel_size: float = config.DEFAULT_VOXEL_SIZE,
    origin=(0.0, 0.0, 0.0),
) -> go.Figure:
    """Create a 3D figure with the frustum and any number of frontiers."""
    traces = []
    if camera is not None and camera.is_ready():
        traces.append(frustum_trace(camera))
    for idx, frontier in enumerate(frontiers):
        if len(frontier) == 0:
            continue
        traces.append(frontier_trace(frontier, voxel_size, origin, name=f"frontier {idx}"))

    fig = go.Figure(traces)
    fig.update_layout(scene=dict(aspectmode="data"))
    return fig


def save_figure_html(fig: go.Figure, output) -> Path:
    """Write ``fig`` to ``output`` as HTML, creating parent directories."""
    output = Path(output)
    output.parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(str(output))
    return output
