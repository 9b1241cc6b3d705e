"""
Material Sweep Example

The same 3 m beam under a 50 kN mid-span point load, checked with every
material in the catalogue.
"""

from stresscheck import MATERIALS, Component, Dimensions, Load, analyze

load = Load(id="P", component_id="beam", type="point", magnitude=50_000.0)

print(f"{'Material':<22}{'Max (MPa)':>12}{'SF':>8}  Status")
for material in MATERIALS:
    beam = Component(
        id="beam",
        type="beam",
        material=material,
        dimensions=Dimensions(length=3.0, width=0.3, height=0.3),
    )
    result = analyze([beam], [load])
    stress = result.stresses[0]
    print(f"{material.name:<22}{stress.max_stress:>12.2f}{stress.safety_factor:>8.2f}  {result.status}")
