from stresscheck.loads.load import DIRECTIONS, LOAD_TYPES, Direction, Load, LoadType, loads_on

__all__ = [
    "Load",
    "LoadType",
    "Direction",
    "LOAD_TYPES",
    "DIRECTIONS",
    "loads_on",
]
