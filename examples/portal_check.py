"""
Portal Stress Check Example

Two columns carrying a beam, with a uniformly distributed roof load on the
beam and a point load on one column. Prints the per-component check and
writes a text report plus an svg of the classified structure.
"""

from pathlib import Path

from stresscheck import Load, Structure, get_material
from stresscheck.io import report_filename, write_report

# Create gallery directory
gallery_dir = Path("gallery")
gallery_dir.mkdir(exist_ok=True)

# 1. Place components (default placement dimensions)
structure = Structure()
left = structure.place("column", position=(0.0, 0.0, 0.0))
right = structure.place("column", position=(3.0, 0.0, 0.0))
beam = structure.place("beam", position=(1.5, 0.0, 3.0), material=get_material("Wood (Douglas Fir)"))
structure.place("support", position=(0.0, 0.0, -0.3), material=get_material("Concrete C30"))

# 2. Apply loads
structure.add_load(Load(id="roof", component_id=beam.id, type="distributed", magnitude=-20_000.0))  # 20 kN/m
structure.add_load(Load(id="crane", component_id=right.id, type="point", magnitude=150_000.0, direction="z"))

# 3. Analyze
result = structure.analyze()

print(f"Status: {result.status.upper()}")
print(f"Total applied load: {result.total_load:,.0f} N")
print(f"Max deflection: {result.max_deflection:.6f} m")
for stress in result.stresses:
    component = structure.component(stress.component_id)
    print(
        f"  {component.id:>7} {component.type:<8} max {stress.max_stress:8.2f} MPa"
        f"  SF {stress.safety_factor:6.2f}  {stress.level}"
    )

# 4. Export
report_path = write_report(result, gallery_dir / report_filename(result), structure.components.values())
structure.plot(result=result, save_path=str(gallery_dir / "portal_check.svg"))

print(f"\nReport saved to: {report_path}")
print(f"Plot saved to: {gallery_dir / 'portal_check.svg'}")
