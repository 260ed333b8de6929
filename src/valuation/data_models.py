from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Literal


YesNo = Literal["yes", "no"]
WorkingState = Literal["working", "not_working"]
TyreLife = Literal["75-100", "50-74", "25-49", "0-24"]
Condition4 = Literal["excellent", "good", "average", "poor"]

BodyType = Literal["hatchback", "sedan", "suv", "muv_mpv", "coupe_convertible", "pickup_van"]
FuelType = Literal["petrol", "diesel", "cng", "electric"]
Transmission = Literal["manual", "automatic"]
Ownership = Literal["1st", "2nd", "3rd", "4th+"]
RcStatus = Literal["active", "inactive", "pending"]
InsuranceType = Literal["comprehensive", "third_party", "none"]
PriceCheckReason = Literal["immediate_sale", "price_check", "market_value"]

ScratchCount = Literal["0", "3-5", "6-10", ">10"]
DentCount = Literal["0", "1-2", "3-5", ">5"]
RustExtent = Literal["none", "minor", "visible", "structural"]


@dataclass(frozen=True)
class UsageHistory:
    odometer: int
    usage_type: Literal["personal", "commercial"]
    city_driven: YesNo
    flood_damage: YesNo
    accident: YesNo
    service_center: Literal["authorized", "local", "mixed"]


@dataclass(frozen=True)
class EngineMechanical:
    engine: Literal["smooth", "noise", "vibration", "other"]
    gearbox: Literal["smooth", "hard_shifting", "noise", "other"]
    clutch: Literal["normal", "hard", "slipping", "other"]
    battery: Literal["new", "average", "weak", "not_working"]
    radiator: Literal["good", "leakage", "overheating", "damaged"]
    exhaust: Literal["normal_smoke", "noise", "smoke", "other"]
    suspension: Literal["good", "noise", "bumpy", "worn_out"]
    steering: Literal["normal", "play", "hard", "alignment"]
    brakes: Literal["good", "needs_service", "weak"]


@dataclass(frozen=True)
class Fluids:
    engine_oil: Literal["ok", "low", "dirty", "replace"]
    coolant: Literal["ok", "low", "leak"]
    brake_fluid: Literal["ok", "low", "contaminated"]
    washer_fluid: Literal["ok", "low"]


@dataclass(frozen=True)
class Exterior:
    front_bumper: Literal["original", "scratch", "repaint", "damaged"]
    rear_bumper: Literal["original", "scratch", "repaint", "damaged"]
    bonnet: Literal["original", "scratch", "repaint", "dent"]
    roof: Literal["original", "repaint", "dent"]
    doors: Literal["original", "repaint_one", "repaint_multi", "dent"]
    fenders: Literal["original", "scratch", "repaint", "dent"]
    paint_quality: Literal["excellent", "average", "dull", "poor"]
    accident_history: Literal["none", "minor", "major"]


@dataclass(frozen=True)
class Interior:
    seats: Condition4
    seat_covers: Literal["new", "average", "torn", "not_present"]
    dashboard: Condition4
    dashboard_warning_lights: Literal["normal", "minor", "critical"]
    steering_wheel: Literal["excellent", "normal_wear", "worn_out", "damaged"]
    roof_lining: Literal["clean", "dirty", "sagging", "damaged"]
    floor_mats: Literal["present", "not_present"]
    ac: Literal["working", "weak", "noise", "not_working"]
    infotainment: Literal["working", "minor_issues", "touch_issue", "not_working"]


@dataclass(frozen=True)
class Electrical:
    power_windows: Literal["all_working", "one_not_working", "multiple_not_working", "none_working"]
    central_locking: WorkingState
    headlights: WorkingState
    indicators: WorkingState
    horn: WorkingState
    reverse_camera: Literal["working", "minor_issue", "not_working", "na"]
    sensors: Literal["working", "some_not_working", "not_working", "na"]
    wipers: WorkingState


@dataclass(frozen=True)
class Tyres:
    front_tyres: TyreLife
    rear_tyres: TyreLife
    spare_tyre: Literal["usable", "worn", "not_present"]
    alloy_wheels: YesNo
    wheel_alignment: Literal["ok", "needed"]


@dataclass(frozen=True)
class Safety:
    airbags: Literal["dual_multiple", "driver_only", "none", "deployed_faulty"]
    abs: YesNo
    seat_belts: Literal["all_working", "one_not_working", "multiple_not_working"]
    child_lock: YesNo
    immobilizer: YesNo


@dataclass(frozen=True)
class Documents:
    rc_book: Literal["original", "duplicate", "lost"]
    insurance_doc: Literal["comprehensive", "third_party", "expired_30", "expired_90", "none"]
    puc: Literal["valid", "expired", "not_available"]
    service_records: Literal["full", "partial", "none"]
    duplicate_key: Literal["available", "not_available"]
    noc: Literal["not_required", "available", "pending", "not_available"]


@dataclass(frozen=True)
class AdditionalFeatures:
    music_system: YesNo
    reverse_parking_sensor: YesNo
    dashcam: YesNo
    fog_lamps: YesNo
    gps_tracker: YesNo


@dataclass(frozen=True)
class VehicleAssessment:
    make: str
    model: str
    variant: str
    body_type: BodyType
    fuel_type: FuelType
    transmission: Transmission
    manufacture_year: int
    registration_year: int
    registration_state: str
    ownership: Ownership
    rc_status: RcStatus
    insurance: InsuranceType
    hypothecation: YesNo
    expected_price: float
    current_year: int
    usage: UsageHistory
    engine_mechanical: EngineMechanical
    fluids: Fluids
    exterior: Exterior
    interior: Interior
    electrical: Electrical
    tyres: Tyres
    safety: Safety
    documents: Documents
    additional: AdditionalFeatures
    # Captured outside the exterior block by the form, scored with it.
    scratches: ScratchCount = "0"
    dents: DentCount = "0"
    rust_areas: RustExtent = "none"
    price_check_reason: PriceCheckReason = "price_check"

    @property
    def age(self) -> int:
        return self.current_year - self.manufacture_year


@dataclass(frozen=True)
class CategoryDepreciation:
    """Depreciation percentage per category, already clamped to its cap."""

    odometer: float
    age: float
    usage: float
    engine: float
    exterior: float
    interior: float
    electrical: float
    tyres: float
    safety: float
    documents: float
    fluids: float = 0.0


@dataclass(frozen=True)
class PriceTrail:
    expected_price: float
    after_odometer: float
    after_all_sections: float
    after_age: float
    final_price: float


@dataclass(frozen=True)
class ConfidenceBand:
    market_value_min: int
    market_value_max: int
    ideal_listing_price: int
    expected_final_deal: int
    advisory: str


@dataclass(frozen=True)
class ValuationResult:
    best_price: int
    trail: PriceTrail
    seller_protection_applied: bool
    good_car_bonus_applied: bool
    depreciation: CategoryDepreciation
    band: ConfidenceBand

    def breakdown(self) -> list[tuple[str, float]]:
        dep = self.depreciation
        return [
            ("Odometer", dep.odometer),
            ("Vehicle Age", dep.age),
            ("Usage History", dep.usage),
            ("Engine Condition", dep.engine),
            ("Exterior Condition", dep.exterior),
            ("Interior Condition", dep.interior),
            ("Tyre Condition", dep.tyres),
            ("Documents", dep.documents),
            ("Other (Electrical, Safety, Fluids)", dep.electrical + dep.safety + dep.fluids),
        ]

    def as_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "best_price": self.best_price,
            "seller_protection_applied": self.seller_protection_applied,
            "good_car_bonus_applied": self.good_car_bonus_applied,
        }
        out.update({f"p_{k}": v for k, v in asdict(self.trail).items()})
        out.update({f"depreciation_{k}": v for k, v in asdict(self.depreciation).items()})
        out.update(asdict(self.band))
        return out
