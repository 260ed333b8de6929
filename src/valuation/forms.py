"""Shape a flat web-form submission into a nested ``VehicleAssessment``.

The form posts every attribute at the top level, in camelCase or snake_case;
contact details and any other unknown keys are dropped here.
"""
from __future__ import annotations

import re
from dataclasses import MISSING, fields
from typing import Any, Mapping

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
from valuation.engine import InvalidAssessmentError

SECTION_TYPES: dict[str, type] = {
    "usage": UsageHistory,
    "engine_mechanical": EngineMechanical,
    "fluids": Fluids,
    "exterior": Exterior,
    "interior": Interior,
    "electrical": Electrical,
    "tyres": Tyres,
    "safety": Safety,
    "documents": Documents,
    "additional": AdditionalFeatures,
}

_DIGITS = re.compile(r"^[0-9]+$")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


def snake_case(key: str) -> str:
    return _CAMEL_BOUNDARY.sub(r"_\1", key).lower()


def _odometer(raw: Any) -> int:
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    text = str(raw).strip()
    if not _DIGITS.match(text):
        raise InvalidAssessmentError(f"Odometer must be a valid number, got {raw!r}")
    return int(text)


def _coerce(name: str, raw: Any, kind: type) -> Any:
    if isinstance(raw, bool):
        raise InvalidAssessmentError(f"{name} must be numeric, got {raw!r}")
    if kind is int and isinstance(raw, float) and not raw.is_integer():
        raise InvalidAssessmentError(f"{name} must be a whole number, got {raw!r}")
    try:
        return kind(raw)
    except (TypeError, ValueError) as exc:
        raise InvalidAssessmentError(f"{name} must be numeric, got {raw!r}") from exc


_ROOT_COERCIONS = {
    "manufacture_year": int,
    "registration_year": int,
    "expected_price": float,
}


def _pick(form: Mapping[str, Any], target: type, coerce: Mapping[str, Any]) -> dict[str, Any]:
    picked: dict[str, Any] = {}
    for f in fields(target):
        if f.name in SECTION_TYPES or f.name == "current_year":
            continue
        if f.name not in form:
            if f.default is not MISSING:
                continue
            raise InvalidAssessmentError(f"Missing form field: {f.name}")
        value = form[f.name]
        if f.name in coerce:
            value = coerce[f.name](f.name, value)
        picked[f.name] = value
    return picked


def assessment_from_form(form: Mapping[str, Any], current_year: int) -> VehicleAssessment:
    normalized = {snake_case(k): v for k, v in form.items()}

    sections: dict[str, Any] = {}
    for name, section_type in SECTION_TYPES.items():
        coerce = {"odometer": lambda _, v: _odometer(v)} if section_type is UsageHistory else {}
        sections[name] = section_type(**_pick(normalized, section_type, coerce))

    root_coerce = {key: (lambda n, v, k=kind: _coerce(n, v, k)) for key, kind in _ROOT_COERCIONS.items()}
    root = _pick(normalized, VehicleAssessment, root_coerce)
    return VehicleAssessment(current_year=current_year, **root, **sections)
