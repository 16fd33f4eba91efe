#!/usr/bin/env python3
"""
Generate a 2D visualization of light at a boundary between two media:
media fills, boundary, normal, incident ray and the refracted or reflected ray,
with angle and speed annotations.
Uses Plotly (graph_objects) for modern, interactive rendering.
"""

import io
from dataclasses import dataclass

import plotly.graph_objects as go

from backend.materials import lighten_color, material_color
from backend.optics_solver import OpticsResult, solve
from backend.ray_geometry import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    RAY_LENGTH,
    annotations,
    canvas_center,
    trace_segments,
)

DEFAULT_INCIDENCE_ANGLE = 45.0
DEFAULT_LASER_COLOR = "#ff0000"

BOUNDARY_LINE = "black"
NORMAL_LINE = "gray"
GLOW_LIGHTEN = 100  # channel boost for the faint glow under the beam


@dataclass(frozen=True)
class SceneState:
    """Everything the page knows about the current scene; owned by the caller."""
    n1: float = 1.0
    n2: float = 1.5
    incidence_angle_deg: float = DEFAULT_INCIDENCE_ANGLE  # from the boundary, [0, 90]
    show_normals: bool = True
    show_angles: bool = True
    laser_color: str = DEFAULT_LASER_COLOR


def solve_state(state: SceneState) -> OpticsResult:
    """Run the solver on a scene state."""
    return solve(state.n1, state.n2, state.incidence_angle_deg)


def render_refraction_scene(state, result=None, width=CANVAS_WIDTH, height=CANVAS_HEIGHT,
                            ray_length=RAY_LENGTH, output_path=None, return_figure=False,
                            return_html=False, scale=1):
    """
    Render the boundary scene: medium 1 on top, medium 2 below, laser rays
    meeting at the centre of the boundary.

    Styling:
    - Media: preset colours (air white, water cyan, glass grey, custom light blue)
    - Boundary: solid black line; normal: dashed gray line (when show_normals)
    - Rays: laser_color over a wider, lightened glow
    - Text: angle lines (when show_angles) and medium speeds, top-left
    - Canvas coordinates: y grows downward, 1:1 aspect ratio
    """
    if result is None:
        result = solve_state(state)
    center = canvas_center(width, height)
    cx, cy = center

    fig = go.Figure()

    # 1. Media fills
    fig.add_shape(type="rect", x0=0, y0=0, x1=width, y1=cy, layer="below",
                  line=dict(width=0), fillcolor=material_color(state.n1))
    fig.add_shape(type="rect", x0=0, y0=cy, x1=width, y1=height, layer="below",
                  line=dict(width=0), fillcolor=material_color(state.n2))

    # 2. Boundary
    fig.add_trace(go.Scatter(
        x=[0, width],
        y=[cy, cy],
        mode="lines",
        line=dict(color=BOUNDARY_LINE, width=2),
        name="Boundary",
        showlegend=False,
        hoverinfo="skip",
    ))

    # 3. Normal
    if state.show_normals:
        fig.add_trace(go.Scatter(
            x=[cx, cx],
            y=[0, height],
            mode="lines",
            line=dict(color=NORMAL_LINE, width=1, dash="dash"),
            name="Normal",
            showlegend=False,
            hoverinfo="skip",
        ))

    # 4. Rays: glow first, beam on top
    glow = lighten_color(state.laser_color, GLOW_LIGHTEN)
    for seg in trace_segments(result, state.incidence_angle_deg, center=center, length=ray_length):
        xs = [seg.start[0], seg.end[0]]
        ys = [seg.start[1], seg.end[1]]
        fig.add_trace(go.Scatter(
            x=xs,
            y=ys,
            mode="lines",
            line=dict(color=glow, width=6),
            opacity=0.4,
            showlegend=False,
            hoverinfo="skip",
        ))
        fig.add_trace(go.Scatter(
            x=xs,
            y=ys,
            mode="lines",
            line=dict(color=state.laser_color, width=2),
            name=seg.kind.capitalize(),
            hovertemplate=f"{seg.kind.capitalize()} ray<extra></extra>",
            showlegend=False,
        ))

    # 5. Text annotations
    for i, text in enumerate(annotations(result, show_angles=state.show_angles)):
        fig.add_annotation(
            x=10,
            y=20 + 20 * i,
            text=text,
            showarrow=False,
            xanchor="left",
            yanchor="middle",
            font=dict(family="Arial", size=14, color="black"),
        )

    fig.update_layout(
        template="plotly_white",
        xaxis=dict(range=[0, width], visible=False, scaleanchor="y", scaleratio=1),
        yaxis=dict(range=[height, 0], visible=False),
        plot_bgcolor="white",
        paper_bgcolor="white",
        margin=dict(l=0, r=0, t=0, b=0),
        showlegend=False,
    )

    if return_figure:
        return fig
    if return_html:
        # to_html() needs no Kaleido/Chromium
        return fig.to_html(include_plotlyjs=True, full_html=True,
                           config={"responsive": True})
    if output_path:
        fig.write_image(output_path, width=width, height=height, scale=scale)
        return output_path
    buf = io.BytesIO()
    fig.write_image(buf, format="png", width=width, height=height, scale=scale)
    return buf.getvalue()
