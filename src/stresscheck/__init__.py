"""
stresscheck - simplified static stress check for placed structural components.

Each component (beam, column, wall, support) is checked on its own:
- applied point/distributed loads plus self-weight give one resultant force
- average and bending stress give a safety factor against yield
- the factor classifies the component (red/orange/yellow/green)
- the worst component sets the overall status (safe/warning/critical)

Deliberately simple: no load paths between components, no FEM, no dynamics.
"""

from stresscheck.analysis import analyze
from stresscheck.analysis.settings import AnalysisSettings
from stresscheck.core.catalogue import DEFAULT_MATERIAL, MATERIALS, get_material
from stresscheck.core.material import Material
from stresscheck.io.report import format_report, write_report
from stresscheck.loads.load import Load
from stresscheck.model.component import Component, Dimensions, Position
from stresscheck.model.structure import Structure
from stresscheck.results.analysis_result import AnalysisResult
from stresscheck.results.stress_data import StressData

__version__ = "0.1.0"

__all__ = [
    "Material",
    "MATERIALS",
    "DEFAULT_MATERIAL",
    "get_material",
    "Component",
    "Dimensions",
    "Position",
    "Structure",
    "Load",
    "AnalysisSettings",
    "AnalysisResult",
    "StressData",
    "analyze",
    "format_report",
    "write_report",
]
