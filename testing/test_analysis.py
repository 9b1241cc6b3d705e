from __future__ import annotations

import math
from datetime import datetime, timezone

import pytest

from stresscheck import AnalysisSettings, Component, Load, Material, analyze, get_material
from stresscheck.analysis import (
    classify_status,
    component_deflection,
    component_stress,
    max_deflection,
    stress_color,
    total_applied_load,
)
from stresscheck.results import GREEN, ORANGE, RED, YELLOW, StressData

FIXED = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _clock() -> datetime:
    return FIXED


def _component(
    id: str = "C1",
    type: str = "beam",
    material: str = "Steel A36",
    dims: tuple = (3.0, 0.3, 0.3),
) -> Component:
    return Component(id=id, type=type, material=get_material(material), dimensions=dims)  # type: ignore[arg-type]


def _sd(factor: float, id: str = "C") -> StressData:
    return StressData(
        component_id=id,
        max_stress=1.0,
        min_stress=0.0,
        avg_stress=0.5,
        stress_color=stress_color(factor),
        safety_factor=factor,
    )


def test_empty_structure() -> None:
    result = analyze([], [Load(id="L1", component_id="ghost", type="point", magnitude=10.0)], clock=_clock)
    assert result.stresses == ()
    assert result.max_deflection == 0.0
    assert result.total_load == 0.0
    assert result.status == "safe"
    assert result.timestamp == FIXED


def test_self_weight_only_beam() -> None:
    """3 m steel beam, 0.3 x 0.3 section, no applied loads."""
    beam = _component()
    result = analyze([beam], [], clock=_clock)
    stress = result.stresses[0]

    weight = 0.27 * 7850.0 * 9.81
    avg = weight / (0.09 * 1e6)
    inertia = 0.3 * 0.3 ** 3 / 12.0
    bending = (weight * 1.5) * 0.15 / (inertia * 1e6)

    assert stress.avg_stress == pytest.approx(avg)
    assert stress.avg_stress == pytest.approx(0.231, abs=1e-3)
    assert stress.max_stress == pytest.approx(avg + bending)
    assert stress.min_stress == 0.0  # avg - bending is negative, clamped
    assert stress.safety_factor == pytest.approx(250.0 / (avg + bending))
    assert stress.safety_factor > 2.0
    assert stress.stress_color == GREEN
    assert result.status == "safe"
    assert result.total_load == 0.0  # self-weight excluded


def test_large_point_load_on_wood_is_critical() -> None:
    beam = _component(material="Wood (Douglas Fir)")
    load = Load(id="L1", component_id="C1", type="point", magnitude=1_000_000.0)
    result = analyze([beam], [load], clock=_clock)

    stress = result.stresses[0]
    assert stress.safety_factor < 1.0
    assert stress.stress_color == RED
    assert stress.level == "critical"
    assert result.status == "critical"
    assert result.total_load == pytest.approx(1_000_000.0)


def test_wall_has_no_bending() -> None:
    wall = _component(type="wall", dims=(1.0, 0.2, 3.0))
    stress = analyze([wall], [Load(id="L", component_id="C1", type="point", magnitude=6000.0)]).stresses[0]
    assert stress.max_stress == pytest.approx(stress.avg_stress)
    assert stress.min_stress == pytest.approx(stress.avg_stress)
    weight = 0.6 * 7850.0 * 9.81
    assert stress.avg_stress == pytest.approx((6000.0 + weight) / (0.6 * 1e6))


def test_warning_and_caution_bands() -> None:
    # support 1 x 0.1 x 0.1 steel: area 0.01 m^2, no bending term
    support = _component(type="support", dims=(1.0, 0.1, 0.1))
    weight = 0.01 * 7850.0 * 9.81

    warning = analyze([support], [Load(id="L", component_id="C1", type="point", magnitude=1.9e6)])
    stress = warning.stresses[0]
    assert stress.avg_stress == pytest.approx((1.9e6 + weight) / 1e4)
    assert 1.0 <= stress.safety_factor < 1.5
    assert stress.stress_color == ORANGE
    assert warning.status == "warning"

    caution = analyze([support], [Load(id="L", component_id="C1", type="point", magnitude=1.5e6)])
    stress = caution.stresses[0]
    assert 1.5 <= stress.safety_factor < 2.0
    assert stress.stress_color == YELLOW
    assert caution.status == "safe"


def test_status_is_worst_component() -> None:
    strong = _component(id="A", material="Titanium Ti-6Al-4V")
    weak = _component(id="B", material="Wood (Douglas Fir)")
    loads = [Load(id="L1", component_id="B", type="point", magnitude=1_000_000.0)]
    result = analyze([strong, weak], loads)
    assert result.stress_for("A").stress_color == GREEN
    assert result.stress_for("B").stress_color == RED
    assert result.status == "critical"
    assert [s.component_id for s in result.components_at_risk()] == ["B"]
    assert result.min_safety_factor == result.stress_for("B").safety_factor


def test_stresses_follow_input_order() -> None:
    components = [
        _component(id="z", type="column", dims=(1.0, 0.3, 3.0)),
        _component(id="a", type="wall", dims=(1.0, 0.2, 3.0)),
        _component(id="m", type="support", dims=(1.0, 0.3, 0.3)),
        _component(id="b"),
    ]
    result = analyze(components, [])
    assert len(result.stresses) == len(components)
    assert [s.component_id for s in result.stresses] == ["z", "a", "m", "b"]
    for stress in result.stresses:
        assert 0.0 <= stress.min_stress <= stress.max_stress


def test_distributed_load_scales_with_length() -> None:
    short = _component(dims=(2.0, 0.3, 0.3))
    long = _component(dims=(4.0, 0.3, 0.3))
    load = Load(id="L1", component_id="C1", type="distributed", magnitude=500.0)

    assert total_applied_load([short], [load]) == pytest.approx(1000.0)
    assert total_applied_load([long], [load]) == pytest.approx(2000.0)

    short_force = component_stress(short, [load]).avg_stress * 0.09 * 1e6 - 2.0 * 0.09 * 7850.0 * 9.81
    long_force = component_stress(long, [load]).avg_stress * 0.09 * 1e6 - 4.0 * 0.09 * 7850.0 * 9.81
    assert long_force == pytest.approx(2.0 * short_force)


def test_moment_loads_are_inert() -> None:
    beam = _component()
    moment = Load(id="M", component_id="C1", type="moment", magnitude=1e9)
    with_moment = analyze([beam], [moment], clock=_clock)
    without = analyze([beam], [], clock=_clock)
    assert with_moment.stresses == without.stresses
    assert with_moment.total_load == 0.0


def test_loads_on_missing_components() -> None:
    beam = _component()
    loads = [
        Load(id="D", component_id="deleted", type="distributed", magnitude=1000.0),
        Load(id="P", component_id="deleted", type="point", magnitude=-250.0),
    ]
    result = analyze([beam], loads, clock=_clock)
    baseline = analyze([beam], [], clock=_clock)
    assert result.stresses == baseline.stresses
    # distributed load cannot be scaled without its component; point load is counted as-is
    assert result.total_load == pytest.approx(250.0)


def test_zero_stress_is_safe() -> None:
    weightless = Material(name="Foam", elasticity=10.0, density=0.0, yield_strength=1.0)
    component = Component(id="C1", type="beam", material=weightless, dimensions=(2.0, 0.1, 0.1))
    result = analyze([component], [])
    stress = result.stresses[0]
    assert stress.max_stress == 0.0
    assert math.isinf(stress.safety_factor) and stress.safety_factor > 0
    assert stress.stress_color == GREEN
    assert result.status == "safe"
    assert result.max_deflection == 0.0


def test_degenerate_section_does_not_produce_nan() -> None:
    flat = _component(dims=(2.0, 0.0, 0.3))
    load = Load(id="L1", component_id="C1", type="point", magnitude=100.0)
    result = analyze([flat], [load])
    stress = result.stresses[0]
    values = [stress.max_stress, stress.min_stress, stress.avg_stress, stress.safety_factor, result.max_deflection]
    assert not any(math.isnan(value) for value in values)
    assert stress.safety_factor == 0.0
    assert stress.min_stress == 0.0
    assert stress.stress_color == RED
    assert result.status == "critical"
    assert result.max_deflection == 0.0

    unloaded = analyze([flat], []).stresses[0]
    assert unloaded.max_stress == 0.0
    assert unloaded.stress_color == GREEN


def test_max_deflection_formula() -> None:
    beam = _component(material="Wood (Douglas Fir)")
    column = _component(id="C2", type="column", dims=(1.0, 0.3, 3.0))
    result = analyze([beam, column], [Load(id="L", component_id="C1", type="point", magnitude=5000.0)])

    force = 5000.0 + 0.27 * 500.0 * 9.81
    inertia = 0.3 * 0.3 ** 3 / 12.0
    expected_beam = force * 3.0 ** 3 / (3.0 * 13000.0 * 1e6 * inertia)
    assert component_deflection(beam, result.stress_for("C1")) == pytest.approx(expected_beam)
    assert result.max_deflection == pytest.approx(
        max(expected_beam, component_deflection(column, result.stress_for("C2")))
    )
    assert max_deflection([], []) == 0.0


@pytest.mark.parametrize("kind", ["wall", "support"])
def test_non_bending_types_use_same_deflection_formula(kind: str) -> None:
    """A heavily loaded wall/support next to a self-weight-only beam governs max deflection."""
    beam = _component(id="B")
    member = _component(id="N", type=kind, dims=(2.0, 0.1, 0.1))
    load = Load(id="P", component_id="N", type="point", magnitude=500_000.0)
    result = analyze([beam, member], [load])

    force = 500_000.0 + 2.0 * 0.01 * 7850.0 * 9.81
    inertia = 0.1 * 0.1 ** 3 / 12.0
    expected = force * 2.0 ** 3 / (3.0 * 200000.0 * 1e6 * inertia)

    beam_force = 0.27 * 7850.0 * 9.81
    beam_deflection = beam_force * 3.0 ** 3 / (3.0 * 200000.0 * 1e6 * (0.3 * 0.3 ** 3 / 12.0))
    assert expected > beam_deflection
    assert result.max_deflection == pytest.approx(expected)


def test_deflection_pairs_components_by_position() -> None:
    # ids are not unique here; each stress entry must use its own component's geometry
    long_beam = _component(id="X", dims=(6.0, 0.3, 0.3))
    short_support = _component(id="X", type="support", dims=(1.0, 0.3, 0.3))
    result = analyze([long_beam, short_support], [])

    force = 0.54 * 7850.0 * 9.81
    expected = force * 6.0 ** 3 / (3.0 * 200000.0 * 1e6 * (0.3 * 0.3 ** 3 / 12.0))
    assert result.max_deflection == pytest.approx(expected)
    assert max_deflection([long_beam, short_support], result.stresses) == pytest.approx(expected)


def test_thresholds_are_exact() -> None:
    assert stress_color(0.999) == RED
    assert stress_color(1.0) == ORANGE
    assert stress_color(1.5) == YELLOW
    assert stress_color(2.0) == GREEN

    assert classify_status([_sd(0.999)]) == "critical"
    assert classify_status([_sd(1.0)]) == "warning"
    assert classify_status([_sd(1.5)]) == "safe"
    assert classify_status([_sd(3.0), _sd(1.2), _sd(0.5)]) == "critical"
    assert classify_status([]) == "safe"


def test_repeat_runs_are_identical() -> None:
    components = [_component(id="A"), _component(id="B", type="wall", dims=(1.0, 0.2, 3.0))]
    loads = [
        Load(id="L1", component_id="A", type="distributed", magnitude=-1200.0),
        Load(id="L2", component_id="B", type="point", magnitude=40000.0, direction="x"),
    ]
    first = analyze(components, loads, clock=_clock)
    second = analyze(components, loads, clock=_clock)
    assert first == second


def test_result_is_independent_of_caller_lists() -> None:
    components = [_component()]
    loads = [Load(id="L1", component_id="C1", type="point", magnitude=1000.0)]
    result = analyze(components, loads)
    snapshot = result.to_dict()

    components.append(_component(id="C2"))
    loads.append(Load(id="L2", component_id="C1", type="point", magnitude=1e7))
    assert result.to_dict() == snapshot
    assert len(result.stresses) == 1


def test_settings_validation() -> None:
    with pytest.raises(ValueError):
        AnalysisSettings(gravity=0.0).validate()
    with pytest.raises(ValueError):
        AnalysisSettings(warning_threshold=2.5).validate()
    with pytest.raises(ValueError):
        analyze([_component()], [], settings=AnalysisSettings(critical_threshold=-1.0))


def test_verbose_logs_summary(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("INFO", logger="stresscheck.analysis.engine")
    analyze([_component()], [], settings=AnalysisSettings(verbose=True))
    assert any("analysis safe" in record.getMessage() for record in caplog.records)


def test_result_to_dict() -> None:
    result = analyze([_component()], [], clock=_clock)
    data = result.to_dict()
    assert data["status"] == "safe"
    assert data["timestamp"] == FIXED.isoformat()
    assert data["stresses"][0]["component_id"] == "C1"
    assert set(data) == {"stresses", "max_deflection", "total_load", "timestamp", "status"}
    with pytest.raises(KeyError):
        result.stress_for("missing")
