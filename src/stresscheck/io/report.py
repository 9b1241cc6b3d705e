"""
Plain-text analysis report.

Informational summary of an `AnalysisResult`: overall status, load and
deflection totals, one block per analysed component and a recommendation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from stresscheck.model.component import Component
from stresscheck.results.analysis_result import AnalysisResult
from stresscheck.results.stress_data import StressData

RECOMMENDATIONS: Dict[str, str] = {
    "safe": "Structure is safe under current loads",
    "warning": "Review components with low safety factors",
    "critical": "Structure requires immediate reinforcement",
}


def format_report(result: AnalysisResult, components: Optional[Iterable[Component]] = None) -> str:
    by_id: Dict[str, Component] = {c.id: c for c in components} if components is not None else {}

    lines: List[str] = [
        "STRUCTURAL ANALYSIS REPORT",
        f"Generated: {result.timestamp.isoformat(timespec='seconds')}",
        "",
        "SUMMARY",
        f"Status: {result.status.upper()}",
        f"Total Load: {result.total_load:,.2f} N",
        f"Max Deflection: {result.max_deflection:.4f} m",
        f"Components Analysed: {len(result.stresses)}",
        "",
        "STRESS ANALYSIS",
    ]
    for index, stress in enumerate(result.stresses, start=1):
        lines.extend(_stress_block(index, stress, by_id.get(stress.component_id)))
        lines.append("")

    lines.append("RECOMMENDATIONS")
    lines.append(RECOMMENDATIONS[result.status])
    return "\n".join(lines) + "\n"


def write_report(
    result: AnalysisResult,
    path: Union[str, Path],
    components: Optional[Iterable[Component]] = None,
) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(format_report(result, components), encoding="utf-8")
    return target


def report_filename(result: AnalysisResult) -> str:
    return f"structural-analysis-{int(result.timestamp.timestamp() * 1000)}.txt"


def _stress_block(index: int, stress: StressData, component: Optional[Component]) -> List[str]:
    label = f"Component {index} ({stress.component_id})"
    if component is not None:
        label += f" - {component.type}, {component.material.name}"
    return [
        f"{label}:",
        f"  Max Stress: {stress.max_stress:.2f} MPa",
        f"  Min Stress: {stress.min_stress:.2f} MPa",
        f"  Avg Stress: {stress.avg_stress:.2f} MPa",
        f"  Safety Factor: {stress.safety_factor:.2f}",
        f"  Stress Level: {stress.level} ({stress.stress_color})",
    ]
