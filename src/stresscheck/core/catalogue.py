"""
Fixed materials catalogue.

Process-wide reference data: an immutable tuple of `Material` records that a
component's material is normally picked from. The analysis engine only reads
the numeric fields and never checks membership.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from stresscheck.core.material import Material

MATERIALS: Tuple[Material, ...] = (
    Material(name="Steel A36", elasticity=200000, density=7850, yield_strength=250, color="#6c757d"),
    Material(name="Steel A572-50", elasticity=200000, density=7850, yield_strength=345, color="#495057"),
    Material(name="Aluminum 6061-T6", elasticity=68900, density=2700, yield_strength=276, color="#adb5bd"),
    Material(name="Concrete C30", elasticity=33000, density=2400, yield_strength=30, color="#ced4da"),
    Material(name="Concrete C40", elasticity=35000, density=2400, yield_strength=40, color="#adb5bd"),
    Material(name="Wood (Douglas Fir)", elasticity=13000, density=500, yield_strength=50, color="#8d6e63"),
    Material(name="Titanium Ti-6Al-4V", elasticity=113800, density=4430, yield_strength=880, color="#90a4ae"),
)

_BY_NAME: Dict[str, Material] = {material.name: material for material in MATERIALS}

DEFAULT_MATERIAL: Material = _BY_NAME["Steel A36"]


def get_material(name: str) -> Material:
    if name not in _BY_NAME:
        raise KeyError(f"material {name!r} not found in catalogue")
    return _BY_NAME[name]


def material_names() -> List[str]:
    return [material.name for material in MATERIALS]
