from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


BUYER_PSYCHOLOGY_TIP = (
    "Always list your car slightly higher than your target price. This creates a negotiation "
    "buffer and makes the buyer feel like they are getting a good deal."
)


@dataclass(frozen=True)
class ValuationConfig:
    category_caps: Dict[str, float] = field(
        default_factory=lambda: {
            "usage": 15.0,
            "engine_mechanical": 25.0,
            "exterior": 15.0,
            "interior": 10.0,
            "electrical": 8.0,
            "tyres": 6.0,
            "safety": 5.0,
            "documents": 20.0,
        }
    )
    usage_flat_deduction: float = 15.0
    # (exclusive lower bound in km, percentage), checked top down
    odometer_breakpoints: tuple[tuple[int, float], ...] = (
        (100_000, 9.0),
        (80_000, 6.0),
        (60_000, 5.0),
        (40_000, 3.0),
        (20_000, 1.5),
    )
    # (inclusive upper bound in years, percentage), checked bottom up
    age_brackets: tuple[tuple[int, float], ...] = (
        (1, 2.5),
        (2, 5.0),
        (3, 7.5),
        (4, 11.5),
        (5, 16.0),
        (6, 23.0),
        (7, 30.0),
        (8, 35.0),
        (9, 40.0),
        (10, 43.0),
        (15, 46.0),
    )
    age_beyond_brackets: float = 55.0
    floor_ratio: float = 0.40
    bonus_max_engine: float = 10.0
    bonus_max_documents: float = 5.0
    bonus_multiplier: float = 1.05
    rounding_step: int = 1000
    market_min_multiplier: float = 0.96
    market_max_multiplier: float = 1.02
    listing_multiplier: float = 1.05
    advisory: str = BUYER_PSYCHOLOGY_TIP

    def cap_for(self, category: str) -> float:
        return self.category_caps[category]


DEFAULT_CONFIG = ValuationConfig()
