"""
viz - Matplotlib visualization (read-only)

Draws placed components colored by their stress classification.
Nothing here modifies components or results.
"""

from stresscheck.viz.plot_structure import component_colors, component_extent, plot_structure

__all__ = [
    "component_colors",
    "component_extent",
    "plot_structure",
]
