from stresscheck.results.analysis_result import AnalysisResult, Status
from stresscheck.results.stress_data import GREEN, ORANGE, RED, YELLOW, StressData, StressLevel

__all__ = [
    "AnalysisResult",
    "Status",
    "StressData",
    "StressLevel",
    "RED",
    "ORANGE",
    "YELLOW",
    "GREEN",
]
