from dataclasses import asdict, fields, replace

import pytest

from valuation.data_models import (
    AdditionalFeatures,
    Documents,
    Electrical,
    EngineMechanical,
    Exterior,
    Fluids,
    Interior,
    Safety,
    Tyres,
    UsageHistory,
    VehicleAssessment,
)

CURRENT_YEAR = 2025


def make_assessment(**overrides) -> VehicleAssessment:
    """A 3-year-old, 45,000 km car in perfect condition, asking 500,000."""
    base = VehicleAssessment(
        make="Maruti Suzuki",
        model="Swift",
        variant="VXi",
        body_type="hatchback",
        fuel_type="petrol",
        transmission="manual",
        manufacture_year=CURRENT_YEAR - 3,
        registration_year=CURRENT_YEAR - 3,
        registration_state="MH",
        ownership="1st",
        rc_status="active",
        insurance="comprehensive",
        hypothecation="no",
        expected_price=500_000,
        current_year=CURRENT_YEAR,
        usage=UsageHistory(
            odometer=45_000,
            usage_type="personal",
            city_driven="yes",
            flood_damage="no",
            accident="no",
            service_center="authorized",
        ),
        engine_mechanical=EngineMechanical(
            engine="smooth", gearbox="smooth", clutch="normal", battery="new", radiator="good",
            exhaust="normal_smoke", suspension="good", steering="normal", brakes="good",
        ),
        fluids=Fluids(engine_oil="ok", coolant="ok", brake_fluid="ok", washer_fluid="ok"),
        exterior=Exterior(
            front_bumper="original", rear_bumper="original", bonnet="original", roof="original",
            doors="original", fenders="original", paint_quality="excellent", accident_history="none",
        ),
        interior=Interior(
            seats="excellent", seat_covers="new", dashboard="excellent", dashboard_warning_lights="normal",
            steering_wheel="excellent", roof_lining="clean", floor_mats="present", ac="working",
            infotainment="working",
        ),
        electrical=Electrical(
            power_windows="all_working", central_locking="working", headlights="working",
            indicators="working", horn="working", reverse_camera="working", sensors="working",
            wipers="working",
        ),
        tyres=Tyres(
            front_tyres="75-100", rear_tyres="75-100", spare_tyre="usable", alloy_wheels="yes",
            wheel_alignment="ok",
        ),
        safety=Safety(airbags="dual_multiple", abs="yes", seat_belts="all_working", child_lock="yes", immobilizer="yes"),
        documents=Documents(
            rc_book="original", insurance_doc="comprehensive", puc="valid", service_records="full",
            duplicate_key="available", noc="not_required",
        ),
        additional=AdditionalFeatures(
            music_system="yes", reverse_parking_sensor="yes", dashcam="no", fog_lamps="yes", gps_tracker="no",
        ),
    )
    return replace(base, **overrides)


WORST_ENGINE = EngineMechanical(
    engine="other", gearbox="other", clutch="other", battery="not_working", radiator="damaged",
    exhaust="other", suspension="worn_out", steering="hard", brakes="weak",
)
WORST_EXTERIOR = Exterior(
    front_bumper="damaged", rear_bumper="damaged", bonnet="dent", roof="dent", doors="repaint_multi",
    fenders="dent", paint_quality="poor", accident_history="major",
)
WORST_INTERIOR = Interior(
    seats="poor", seat_covers="torn", dashboard="poor", dashboard_warning_lights="critical",
    steering_wheel="damaged", roof_lining="damaged", floor_mats="not_present", ac="not_working",
    infotainment="not_working",
)
WORST_ELECTRICAL = Electrical(
    power_windows="none_working", central_locking="not_working", headlights="not_working",
    indicators="not_working", horn="not_working", reverse_camera="not_working", sensors="not_working",
    wipers="not_working",
)
WORST_TYRES = Tyres(front_tyres="0-24", rear_tyres="0-24", spare_tyre="not_present", alloy_wheels="no", wheel_alignment="needed")
WORST_SAFETY = Safety(airbags="deployed_faulty", abs="no", seat_belts="multiple_not_working", child_lock="no", immobilizer="no")
WORST_DOCUMENTS = Documents(
    rc_book="lost", insurance_doc="none", puc="not_available", service_records="none",
    duplicate_key="not_available", noc="not_available",
)


def make_wrecked_assessment(**overrides) -> VehicleAssessment:
    """20 years old, 150,000 km, flooded, every attribute at its worst value."""
    worst = make_assessment(
        expected_price=200_000,
        manufacture_year=CURRENT_YEAR - 20,
        registration_year=CURRENT_YEAR - 20,
        usage=UsageHistory(
            odometer=150_000, usage_type="commercial", city_driven="yes", flood_damage="yes",
            accident="yes", service_center="local",
        ),
        engine_mechanical=WORST_ENGINE,
        exterior=WORST_EXTERIOR,
        interior=WORST_INTERIOR,
        electrical=WORST_ELECTRICAL,
        tyres=WORST_TYRES,
        safety=WORST_SAFETY,
        documents=WORST_DOCUMENTS,
        scratches=">10",
        dents=">5",
        rust_areas="structural",
    )
    return replace(worst, **overrides)


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def flat_form(assessment: VehicleAssessment, camel: bool = True) -> dict:
    """Flatten an assessment the way the web form posts it."""
    form = {}
    for f in fields(assessment):
        value = getattr(assessment, f.name)
        if f.name == "current_year":
            continue
        if hasattr(value, "__dataclass_fields__"):
            form.update(asdict(value))
        else:
            form[f.name] = value
    form["odometer"] = str(form["odometer"])
    if camel:
        # rust_areas keeps its snake_case name on the real form
        form = {(k if k == "rust_areas" else _camel(k)): v for k, v in form.items()}
    return form


@pytest.fixture
def assessment() -> VehicleAssessment:
    return make_assessment()


@pytest.fixture
def wrecked() -> VehicleAssessment:
    return make_wrecked_assessment()
