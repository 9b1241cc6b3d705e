from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Iterable, Optional, Tuple

from stresscheck.analysis.settings import AnalysisSettings
from stresscheck.analysis.stress import component_stress
from stresscheck.analysis.summary import classify_status, max_deflection, total_applied_load
from stresscheck.loads.load import Load
from stresscheck.model.component import Component
from stresscheck.results.analysis_result import AnalysisResult

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def analyze(
    components: Iterable[Component],
    loads: Iterable[Load],
    settings: Optional[AnalysisSettings] = None,
    clock: Optional[Clock] = None,
) -> AnalysisResult:
    """
    Run the simplified static stress check over a set of components.

    Inputs are snapshotted on entry, so the returned result does not depend
    on later changes to the caller's lists. Degenerate geometry is handled by
    convention and never raises.
    """
    chosen = settings or AnalysisSettings()
    chosen.validate()
    now = clock or utc_now

    component_list: Tuple[Component, ...] = tuple(components)
    load_list: Tuple[Load, ...] = tuple(loads)
    logger.debug("analyzing %d components with %d loads", len(component_list), len(load_list))

    if not component_list:
        return AnalysisResult(
            stresses=(),
            max_deflection=0.0,
            total_load=0.0,
            timestamp=now(),
            status="safe",
        )

    known = {component.id for component in component_list}
    for load in load_list:
        if load.component_id not in known:
            logger.debug("load %s references missing component %s", load.id, load.component_id)

    stresses = tuple(component_stress(component, load_list, chosen) for component in component_list)
    deflection = max_deflection(component_list, stresses)
    total_load = total_applied_load(component_list, load_list)
    status = classify_status(stresses, chosen)

    if chosen.verbose:
        logger.info(
            "analysis %s: total load %.1f N, max deflection %.4g m, min safety factor %.3g",
            status,
            total_load,
            deflection,
            min(stress.safety_factor for stress in stresses),
        )

    return AnalysisResult(
        stresses=stresses,
        max_deflection=deflection,
        total_load=total_load,
        timestamp=now(),
        status=status,
    )
