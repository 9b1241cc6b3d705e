from .material import Material
from .catalogue import DEFAULT_MATERIAL, MATERIALS, get_material, material_names

__all__ = [
    "Material",
    "MATERIALS",
    "DEFAULT_MATERIAL",
    "get_material",
    "material_names",
]
