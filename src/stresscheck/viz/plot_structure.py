from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np
from mpl_toolkits.mplot3d.art3d import Poly3DCollection

from stresscheck.model.component import Component
from stresscheck.results.analysis_result import AnalysisResult


def component_colors(components: Sequence[Component], result: Optional[AnalysisResult] = None) -> Dict[str, str]:
    """Stress color per component id, falling back to the material color when not analysed."""
    stress_colors: Dict[str, str] = {}
    if result is not None:
        stress_colors = {stress.component_id: stress.stress_color for stress in result.stresses}
    return {c.id: stress_colors.get(c.id, c.material.color) for c in components}


def component_extent(component: Component) -> Tuple[float, float, float]:
    """Box size (dx, dy, dz) used to draw a component, z up."""
    dims = component.dimensions
    if component.type == "column":
        return (dims.width, dims.width, dims.height)
    if component.type == "support":
        return (dims.width, dims.width, dims.width)
    return (dims.length, dims.width, dims.height)


def _box_faces(center_base: np.ndarray, extent: Tuple[float, float, float]) -> List[np.ndarray]:
    dx, dy, dz = extent
    x0, y0, z0 = center_base - np.array([dx / 2.0, dy / 2.0, 0.0])
    corners = np.array(
        [
            [x0, y0, z0],
            [x0 + dx, y0, z0],
            [x0 + dx, y0 + dy, z0],
            [x0, y0 + dy, z0],
            [x0, y0, z0 + dz],
            [x0 + dx, y0, z0 + dz],
            [x0 + dx, y0 + dy, z0 + dz],
            [x0, y0 + dy, z0 + dz],
        ]
    )
    faces = [
        (0, 1, 2, 3),
        (4, 5, 6, 7),
        (0, 1, 5, 4),
        (2, 3, 7, 6),
        (1, 2, 6, 5),
        (0, 3, 7, 4),
    ]
    return [corners[list(face)] for face in faces]


def plot_structure(
    components: Sequence[Component],
    result: Optional[AnalysisResult] = None,
    save_path: Optional[str] = None,
    show: bool = False,
) -> None:
    colors = component_colors(components, result)

    fig = plt.figure()
    ax = fig.add_subplot(111, projection="3d")

    lo = np.zeros(3)
    hi = np.ones(3)
    for index, component in enumerate(components):
        base = np.array(component.position.as_tuple(), dtype=float)
        extent = component_extent(component)
        faces = _box_faces(base, extent)
        ax.add_collection3d(
            Poly3DCollection(faces, facecolors=colors[component.id], edgecolors="black", linewidths=0.5, alpha=0.8)
        )
        ax.text(base[0], base[1], base[2] + extent[2], f"{component.id}", fontsize=8)

        points = np.vstack(faces)
        if index == 0:
            lo, hi = points.min(axis=0), points.max(axis=0)
        else:
            lo = np.minimum(lo, points.min(axis=0))
            hi = np.maximum(hi, points.max(axis=0))

    ax.set_xlim(lo[0], hi[0] if hi[0] > lo[0] else lo[0] + 1.0)
    ax.set_ylim(lo[1], hi[1] if hi[1] > lo[1] else lo[1] + 1.0)
    ax.set_zlim(lo[2], hi[2] if hi[2] > lo[2] else lo[2] + 1.0)
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_zlabel("Z")
    if result is not None:
        ax.set_title(f"Status: {result.status.upper()}")
    ax.view_init(elev=20, azim=45)
    plt.tight_layout()

    if save_path:
        if not save_path.lower().endswith(".svg"):
            save_path = f"{save_path}.svg"
        plt.savefig(save_path, format="svg")
    if show and not save_path:
        plt.show()
    plt.close(fig)
