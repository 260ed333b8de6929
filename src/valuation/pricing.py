from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple, Sequence

from valuation.config import DEFAULT_CONFIG, ValuationConfig
from valuation.data_models import CategoryDepreciation, PriceTrail


class PriceStage(NamedTuple):
    label: str
    percentage: float


@dataclass(frozen=True)
class PriceReduction:
    best_price: int
    trail: PriceTrail
    stage_prices: tuple[float, ...]
    seller_protection_applied: bool
    good_car_bonus_applied: bool


def reduction_stages(dep: CategoryDepreciation) -> list[PriceStage]:
    """Stages in the order they are applied. The order changes the result."""
    return [
        PriceStage("odometer", dep.odometer),
        PriceStage("usage", dep.usage),
        PriceStage("engine", dep.engine),
        PriceStage("exterior", dep.exterior),
        PriceStage("interior", dep.interior),
        PriceStage("electrical", dep.electrical),
        PriceStage("tyres", dep.tyres),
        PriceStage("safety", dep.safety),
        PriceStage("documents", dep.documents),
        PriceStage("age", dep.age),
    ]


def apply_stages(price: float, stages: Sequence[PriceStage]) -> list[float]:
    prices = []
    for stage in stages:
        price = price * (1 - stage.percentage / 100)
        prices.append(price)
    return prices


def round_to_nearest(value: float, step: int = 1000) -> int:
    # Half-up, not banker's rounding: 500.5 steps go up.
    return int(math.floor(value / step + 0.5)) * step


def reduce_price(
    expected_price: float,
    dep: CategoryDepreciation,
    config: ValuationConfig = DEFAULT_CONFIG,
) -> PriceReduction:
    prices = apply_stages(expected_price, reduction_stages(dep))
    after_age = prices[-1]

    min_price = expected_price * config.floor_ratio
    final_price = after_age
    seller_protection = False
    if after_age < min_price:
        final_price = min_price
        seller_protection = True

    good_car_bonus = False
    if dep.engine <= config.bonus_max_engine and dep.documents <= config.bonus_max_documents:
        final_price *= config.bonus_multiplier
        good_car_bonus = True

    trail = PriceTrail(
        expected_price=expected_price,
        after_odometer=prices[0],
        after_all_sections=prices[-2],
        after_age=after_age,
        final_price=final_price,
    )
    return PriceReduction(
        best_price=round_to_nearest(final_price, config.rounding_step),
        trail=trail,
        stage_prices=tuple(prices),
        seller_protection_applied=seller_protection,
        good_car_bonus_applied=good_car_bonus,
    )
