from __future__ import annotations

import logging
import math
from numbers import Integral, Real

from valuation.config import DEFAULT_CONFIG, ValuationConfig
from valuation.confidence import confidence_band
from valuation.data_models import ValuationResult, VehicleAssessment
from valuation.depreciation import category_depreciation
from valuation.pricing import reduce_price

logger = logging.getLogger(__name__)


class InvalidAssessmentError(ValueError):
    """Input the engine refuses to price."""


def _is_int(value: object) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def check_preconditions(assessment: VehicleAssessment) -> None:
    price = assessment.expected_price
    if isinstance(price, bool) or not isinstance(price, Real) or not math.isfinite(price):
        raise InvalidAssessmentError(f"expected_price must be a finite number, got {price!r}")
    if price <= 0:
        raise InvalidAssessmentError(f"expected_price must be positive, got {price!r}")

    odometer = assessment.usage.odometer
    if not _is_int(odometer):
        raise InvalidAssessmentError(f"odometer must be an integer number of km, got {odometer!r}")
    if odometer < 0:
        raise InvalidAssessmentError(f"odometer cannot be negative, got {odometer}")

    for name in ("manufacture_year", "current_year"):
        if not _is_int(getattr(assessment, name)):
            raise InvalidAssessmentError(f"{name} must be an integer year, got {getattr(assessment, name)!r}")
    if assessment.age < 0:
        raise InvalidAssessmentError(
            f"manufacture_year {assessment.manufacture_year} is after current_year {assessment.current_year}"
        )


def calculate_valuation(
    assessment: VehicleAssessment, config: ValuationConfig = DEFAULT_CONFIG
) -> ValuationResult:
    """Price a used car from its assessment.

    Pure and deterministic: the current year comes from ``assessment.current_year``
    and nothing here reads a clock or touches I/O. Either a complete result is
    returned or an exception propagates.
    """
    check_preconditions(assessment)

    dep = category_depreciation(assessment, config)
    reduction = reduce_price(float(assessment.expected_price), dep, config)
    band = confidence_band(reduction.best_price, config)

    result = ValuationResult(
        best_price=reduction.best_price,
        trail=reduction.trail,
        seller_protection_applied=reduction.seller_protection_applied,
        good_car_bonus_applied=reduction.good_car_bonus_applied,
        depreciation=dep,
        band=band,
    )
    logger.info(
        "Valued %s %s %s at %d",
        assessment.manufacture_year,
        assessment.make,
        assessment.model,
        result.best_price,
        extra={
            "extra_data": {
                "best_price": result.best_price,
                "seller_protection_applied": result.seller_protection_applied,
                "good_car_bonus_applied": result.good_car_bonus_applied,
            }
        },
    )
    return result
