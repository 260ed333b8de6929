"""Per-attribute depreciation lookup tables, in percentage points.

Fluids and additional features have no table: they are recorded for the report
but carry no weight. ``dashboard_warning_lights`` likewise has no entry.
"""
from __future__ import annotations

from typing import Dict, Mapping


DepreciationTable = Mapping[str, Mapping[str, float]]

ENGINE_MECHANICAL_TABLE: Dict[str, Dict[str, float]] = {
    "engine": {"smooth": 0, "noise": 2, "vibration": 4, "other": 8},
    "gearbox": {"smooth": 0, "hard_shifting": 2, "noise": 4, "other": 6},
    "clutch": {"normal": 0, "hard": 2, "slipping": 4, "other": 6},
    "battery": {"new": 0, "average": 1, "weak": 2, "not_working": 3},
    "radiator": {"good": 0, "leakage": 1, "overheating": 3, "damaged": 5},
    "exhaust": {"normal_smoke": 0, "noise": 1, "smoke": 2, "other": 4},
    "suspension": {"good": 0, "noise": 2, "bumpy": 4, "worn_out": 6},
    "steering": {"normal": 0, "play": 1, "hard": 3, "alignment": 2},
    "brakes": {"good": 0, "needs_service": 2, "weak": 4},
}

EXTERIOR_TABLE: Dict[str, Dict[str, float]] = {
    "front_bumper": {"original": 0, "scratch": 1, "repaint": 2, "damaged": 3},
    "rear_bumper": {"original": 0, "scratch": 1, "repaint": 2, "damaged": 3},
    "bonnet": {"original": 0, "scratch": 1, "repaint": 2, "dent": 3},
    "roof": {"original": 0, "repaint": 1, "dent": 2},
    "doors": {"original": 0, "repaint_one": 2, "repaint_multi": 4, "dent": 3},
    "fenders": {"original": 0, "scratch": 1, "repaint": 2, "dent": 3},
    "paint_quality": {"excellent": 0, "average": 2, "dull": 4, "poor": 6},
    "accident_history": {"none": 0, "minor": 5, "major": 15},
    "scratches": {"0": 0, "3-5": 1, "6-10": 2, ">10": 3},
    "dents": {"0": 0, "1-2": 1, "3-5": 2, ">5": 4},
    "rust_areas": {"none": 0, "minor": 2, "visible": 5, "structural": 10},
}

INTERIOR_TABLE: Dict[str, Dict[str, float]] = {
    "seats": {"excellent": 0, "good": 1, "average": 2, "poor": 4},
    "seat_covers": {"new": 0, "average": 0.5, "torn": 1, "not_present": 0},
    "dashboard": {"excellent": 0, "good": 1, "average": 2, "poor": 3},
    "steering_wheel": {"excellent": 0, "normal_wear": 0.5, "worn_out": 1, "damaged": 2},
    "roof_lining": {"clean": 0, "dirty": 0.5, "sagging": 2, "damaged": 3},
    "floor_mats": {"present": 0, "not_present": 0.5},
    "ac": {"working": 0, "weak": 2, "noise": 1, "not_working": 4},
    "infotainment": {"working": 0, "minor_issues": 0.5, "touch_issue": 2, "not_working": 3},
}

ELECTRICAL_TABLE: Dict[str, Dict[str, float]] = {
    "power_windows": {"all_working": 0, "one_not_working": 1, "multiple_not_working": 2, "none_working": 3},
    "central_locking": {"working": 0, "not_working": 1},
    "headlights": {"working": 0, "not_working": 0.5},
    "indicators": {"working": 0, "not_working": 0.5},
    "horn": {"working": 0, "not_working": 0.5},
    "reverse_camera": {"working": 0, "minor_issue": 0.5, "not_working": 1, "na": 0},
    "sensors": {"working": 0, "some_not_working": 0.5, "not_working": 1, "na": 0},
    "wipers": {"working": 0, "not_working": 0.5},
}

TYRES_TABLE: Dict[str, Dict[str, float]] = {
    "front_tyres": {"75-100": 0, "50-74": 1, "25-49": 2, "0-24": 3},
    "rear_tyres": {"75-100": 0, "50-74": 1, "25-49": 2, "0-24": 3},
    "spare_tyre": {"usable": 0, "worn": 1, "not_present": 2},
    "alloy_wheels": {"yes": 0, "no": 0},
    "wheel_alignment": {"ok": 0, "needed": 1},
}

SAFETY_TABLE: Dict[str, Dict[str, float]] = {
    "airbags": {"dual_multiple": 0, "driver_only": 1, "none": 2, "deployed_faulty": 5},
    "abs": {"yes": 0, "no": 1},
    "seat_belts": {"all_working": 0, "one_not_working": 0.5, "multiple_not_working": 1},
    "child_lock": {"yes": 0, "no": 0},
    "immobilizer": {"yes": 0, "no": 0},
}

DOCUMENTS_TABLE: Dict[str, Dict[str, float]] = {
    "rc_book": {"original": 0, "duplicate": 5, "lost": 10},
    "insurance_doc": {"comprehensive": 0, "third_party": 1, "expired_30": 2, "expired_90": 4, "none": 6},
    "puc": {"valid": 0, "expired": 0.5, "not_available": 1},
    "service_records": {"full": 0, "partial": 2, "none": 4},
    "duplicate_key": {"available": 0, "not_available": 2},
    "noc": {"not_required": 0, "available": 0, "pending": 1, "not_available": 3},
}

SECTION_TABLES: Dict[str, DepreciationTable] = {
    "engine_mechanical": ENGINE_MECHANICAL_TABLE,
    "exterior": EXTERIOR_TABLE,
    "interior": INTERIOR_TABLE,
    "electrical": ELECTRICAL_TABLE,
    "tyres": TYRES_TABLE,
    "safety": SAFETY_TABLE,
    "documents": DOCUMENTS_TABLE,
}
