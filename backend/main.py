"""
FastAPI backend for the refraction explorer.
Accepts two refractive indices and an incidence angle, returns the solved
boundary (angles, TIR, speeds), ray segments and a rendered scene.
"""

import os
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from backend.materials import get_all_materials
from backend.optics_solver import InvalidInputError
from backend.ray_geometry import RAY_LENGTH
from backend.refraction_service import medium_speed, render_scene_html, run_refraction

_DEFAULT_ORIGINS = "http://localhost:8501,http://127.0.0.1:8501"

app = FastAPI(title="Refraction Explorer API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in os.environ.get("REFRACTION_CORS_ORIGINS", _DEFAULT_ORIGINS).split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class MaterialItem(BaseModel):
    """Preset medium for dropdown."""
    name: str
    refractive_index: float
    color: str


class BoundaryRequest(BaseModel):
    """Boundary configuration from the frontend. incidenceAngle is measured from the boundary."""
    n1: float
    n2: float
    incidenceAngle: float = 45.0
    center: Optional[List[float]] = None  # [x, y]; canvas centre when omitted
    rayLength: float = RAY_LENGTH
    showAngles: bool = True


class RenderRequest(BoundaryRequest):
    """Boundary configuration + display toggles for the rendered scene."""
    showNormals: bool = True
    laserColor: str = "#ff0000"


@app.get("/api/materials", response_model=List[MaterialItem])
def get_materials():
    """
    Return the preset media (Air, Water, Glass) with their refractive index and fill colour.
    """
    return [MaterialItem(**m) for m in get_all_materials()]


@app.post("/api/solve")
def solve_boundary(req: BoundaryRequest):
    """
    Solve refraction / total internal reflection at the boundary.
    Returns: { result: {...}, segments: [{kind, start, end}, ...], annotations: [...] }
    """
    try:
        return run_refraction(req.model_dump())
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/api/render")
def render_boundary(req: RenderRequest):
    """
    Render the scene as standalone Plotly HTML (no Kaleido needed).
    """
    try:
        html = render_scene_html(req.model_dump())
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"html": html}


@app.get("/api/speed")
def get_speed(n: float):
    """
    Speed of light in a medium of index n.
    Example: ?n=1.33 → speed≈2.25e8, formatted "2.25e8 m/s"
    """
    try:
        return medium_speed(n)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
