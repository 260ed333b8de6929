from __future__ import annotations

import logging
from dataclasses import asdict, is_dataclass
from typing import Any, Mapping

from valuation.config import DEFAULT_CONFIG, ValuationConfig
from valuation.data_models import CategoryDepreciation, UsageHistory, VehicleAssessment
from valuation.tables import SECTION_TABLES, DepreciationTable

logger = logging.getLogger(__name__)


def _as_mapping(section: Any) -> Mapping[str, Any]:
    if is_dataclass(section) and not isinstance(section, type):
        return asdict(section)
    return section


def section_depreciation(section: Any, table: DepreciationTable) -> float:
    """Sum the per-attribute deductions of one condition section.

    An attribute without a table, or a value the table does not list, adds 0.
    Nothing is raised for either case, so malformed input under-depreciates.
    """
    total = 0.0
    for attribute, value in _as_mapping(section).items():
        attr_table = table.get(attribute)
        if attr_table is None:
            continue
        points = attr_table.get(value) if isinstance(value, str) else None
        if points is None:
            logger.debug("No depreciation entry for %s=%r, scoring 0", attribute, value)
            continue
        total += points
    return total


def capped(raw: float, cap: float) -> float:
    return min(cap, raw)


def exterior_scoring_fields(assessment: VehicleAssessment) -> dict[str, Any]:
    fields = dict(_as_mapping(assessment.exterior))
    fields["scratches"] = assessment.scratches
    fields["dents"] = assessment.dents
    fields["rust_areas"] = assessment.rust_areas
    return fields


def usage_depreciation(usage: UsageHistory, config: ValuationConfig = DEFAULT_CONFIG) -> float:
    # Flat deduction: flood and accident together still count once.
    if usage.flood_damage == "yes" or usage.accident == "yes":
        return capped(config.usage_flat_deduction, config.cap_for("usage"))
    return 0.0


def odometer_depreciation(km: int, config: ValuationConfig = DEFAULT_CONFIG) -> float:
    for threshold, pct in config.odometer_breakpoints:
        if km > threshold:
            return pct
    return 0.0


def age_depreciation(age: int, config: ValuationConfig = DEFAULT_CONFIG) -> float:
    for upper, pct in config.age_brackets:
        if age <= upper:
            return pct
    return config.age_beyond_brackets


def category_depreciation(
    assessment: VehicleAssessment, config: ValuationConfig = DEFAULT_CONFIG
) -> CategoryDepreciation:
    def scored(name: str, section: Any) -> float:
        return capped(section_depreciation(section, SECTION_TABLES[name]), config.cap_for(name))

    return CategoryDepreciation(
        odometer=odometer_depreciation(assessment.usage.odometer, config),
        age=age_depreciation(assessment.age, config),
        usage=usage_depreciation(assessment.usage, config),
        engine=scored("engine_mechanical", assessment.engine_mechanical),
        exterior=scored("exterior", exterior_scoring_fields(assessment)),
        interior=scored("interior", assessment.interior),
        electrical=scored("electrical", assessment.electrical),
        tyres=scored("tyres", assessment.tyres),
        safety=scored("safety", assessment.safety),
        documents=scored("documents", assessment.documents),
    )
