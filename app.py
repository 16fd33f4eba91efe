#!/usr/bin/env python3
"""
Streamlit web app for exploring refraction and total internal reflection
at a flat boundary between two media.
Sidebar holds the media, laser angle and display toggles; main area shows the scene.
"""

import sys
import os

# Ensure script directory is on path
_script_dir = os.path.dirname(os.path.abspath(__file__))
if _script_dir not in sys.path:
    sys.path.insert(0, _script_dir)

import streamlit as st
import pandas as pd

from backend.materials import CUSTOM, material_names, resolve_index
from backend.optics_solver import InvalidInputError
from backend.ray_geometry import CANVAS_HEIGHT, CANVAS_WIDTH, format_speed
from optics_visualization import (
    DEFAULT_INCIDENCE_ANGLE,
    DEFAULT_LASER_COLOR,
    SceneState,
    render_refraction_scene,
    solve_state,
)
from parsing import angle_from_pointer, parse_index


def _fmt_angle(value):
    return "none" if value is None else f"{value:.2f}°"


def results_table(result):
    """Rows for the numerical summary below the scene."""
    rows = [
        {"Quantity": "Incidence angle (from normal)", "Value": _fmt_angle(result.incidence_angle_deg)},
        {"Quantity": "Total internal reflection", "Value": "yes" if result.total_internal_reflection else "no"},
    ]
    if result.total_internal_reflection:
        rows.append({"Quantity": "Reflection angle", "Value": _fmt_angle(result.reflection_angle_deg)})
    else:
        rows.append({"Quantity": "Refraction angle", "Value": _fmt_angle(result.refraction_angle_deg)})
    rows.extend([
        {"Quantity": "Critical angle", "Value": _fmt_angle(result.critical_angle_deg)},
        {"Quantity": "Speed in medium 1", "Value": f"{format_speed(result.speed_medium1)} m/s"},
        {"Quantity": "Speed in medium 2", "Value": f"{format_speed(result.speed_medium2)} m/s"},
    ])
    return rows


def _medium_input(label, key, default_material):
    """Material dropdown plus custom index field (enabled only for Custom). Returns n."""
    names = material_names()
    material = st.selectbox(label, names, index=names.index(default_material), key=f"{key}_material")
    custom_text = st.text_input(
        f"Custom n ({label.lower()})",
        value="1.2",
        key=f"{key}_custom",
        disabled=material != CUSTOM,
    )
    if material == CUSTOM:
        return resolve_index(CUSTOM, parse_index(custom_text))
    return resolve_index(material)


def _aim_laser(x, y):
    """Button callback for the pointer-aim inputs."""
    st.session_state.incidence_angle = angle_from_pointer(x, y, CANVAS_WIDTH, CANVAS_HEIGHT)


st.set_page_config(page_title="Snell's Law Refraction Explorer", layout="wide")

if "incidence_angle" not in st.session_state:
    st.session_state.incidence_angle = DEFAULT_INCIDENCE_ANGLE

# --- Sidebar: media + laser ---
with st.sidebar:
    st.header("Media")
    errors = []
    indices = []
    for label, key, default in (("Medium 1 (top)", "m1", "Air"), ("Medium 2 (bottom)", "m2", "Glass")):
        try:
            indices.append(_medium_input(label, key, default))
        except InvalidInputError as e:
            errors.append(f"{label}: {e}")
            indices.append(None)
    n1, n2 = indices
    input_error = "\n\n".join(errors)

    st.divider()
    st.header("Laser")
    st.slider(
        "Incidence angle from the boundary (°)",
        0.0, 90.0,
        step=0.5,
        key="incidence_angle",
        help="0° grazes along the boundary, 90° hits it head-on",
    )
    with st.expander("Aim at a canvas point"):
        px = st.number_input("x (px)", 0.0, float(CANVAS_WIDTH), float(CANVAS_WIDTH) * 0.75, step=10.0)
        py = st.number_input("y (px)", 0.0, float(CANVAS_HEIGHT), float(CANVAS_HEIGHT) * 0.75, step=10.0)
        st.button("Aim laser", on_click=_aim_laser, args=(px, py))
    laser_color = st.color_picker("Laser colour", DEFAULT_LASER_COLOR)

    st.divider()
    show_normals = st.toggle("Show normal", value=True)
    show_angles = st.toggle("Show angles", value=True)

# --- Main area ---
st.title("Snell's Law Refraction Explorer")
st.markdown(
    "Pick the two media and the laser angle in the sidebar. Light travelling into a "
    "less dense medium beyond the critical angle is **totally internally reflected**."
)

if input_error:
    st.error(input_error)
    st.info("Custom refractive indices must be positive numbers, e.g. 1.33.")
else:
    state = SceneState(
        n1=n1,
        n2=n2,
        incidence_angle_deg=st.session_state.incidence_angle,
        show_normals=show_normals,
        show_angles=show_angles,
        laser_color=laser_color,
    )
    result = solve_state(state)
    fig = render_refraction_scene(state, result=result, return_figure=True)
    st.plotly_chart(fig, width="stretch")
    with st.expander("Numerical results", expanded=True):
        st.dataframe(pd.DataFrame(results_table(result)), width="stretch", hide_index=True)
