"""
Preset media for the refraction explorer: refractive index and display colour.
"Custom" has no fixed index; its value comes from user input.
"""

from typing import Any, Dict, List, Optional

from backend.optics_solver import InvalidInputError, validate_index

CUSTOM = "Custom"

_PRESETS: List[Dict[str, Any]] = [
    {"name": "Air", "refractive_index": 1.0, "color": "#ffffff"},
    {"name": "Water", "refractive_index": 1.33, "color": "#00ffff"},
    {"name": "Glass", "refractive_index": 1.5, "color": "#d3d3d3"},
]

CUSTOM_COLOR = "#add8e6"  # light blue


def _build_name_index() -> Dict[str, Dict[str, Any]]:
    """Build lowercase name -> preset index for lookup."""
    return {m["name"].lower(): m for m in _PRESETS}


def get_all_materials() -> List[Dict[str, Any]]:
    """Return the preset list (copies) for the API and the UI."""
    return [dict(m) for m in _PRESETS]


def material_names() -> List[str]:
    """Names for a material dropdown, Custom last."""
    return [m["name"] for m in _PRESETS] + [CUSTOM]


def get_material_by_name(name: str) -> Optional[Dict[str, Any]]:
    """Look up preset by name (case-insensitive)."""
    m = _build_name_index().get((name or "").lower().strip())
    return dict(m) if m else None


def material_color(n: float) -> str:
    """Fill colour for a medium; matched on the index value so a custom 1.33 paints as water."""
    for m in _PRESETS:
        if n == m["refractive_index"]:
            return m["color"]
    return CUSTOM_COLOR


def resolve_index(material: str, custom_value: Optional[float] = None) -> float:
    """
    Refractive index for a dropdown selection.
    Presets give their fixed index; Custom requires a positive custom_value.
    """
    if (material or "").strip().lower() == CUSTOM.lower():
        if custom_value is None:
            raise InvalidInputError("Custom material needs a refractive index")
        return validate_index(custom_value, "custom refractive index")
    m = get_material_by_name(material)
    if m is None:
        raise InvalidInputError(f"Unknown material '{material}'")
    return m["refractive_index"]


def lighten_color(color: str, amount: int) -> str:
    """Add amount to each channel of a #rrggbb colour (saturating at 255); returns 'rgb(r, g, b)'."""
    num = int(color.lstrip("#"), 16)
    r = min(255, ((num >> 16) & 255) + amount)
    g = min(255, ((num >> 8) & 255) + amount)
    b = min(255, (num & 255) + amount)
    return f"rgb({r}, {g}, {b})"
