from __future__ import annotations

from valuation.config import DEFAULT_CONFIG, ValuationConfig
from valuation.data_models import ConfidenceBand
from valuation.pricing import round_to_nearest


def confidence_band(best_price: int, config: ValuationConfig = DEFAULT_CONFIG) -> ConfidenceBand:
    step = config.rounding_step
    return ConfidenceBand(
        market_value_min=round_to_nearest(best_price * config.market_min_multiplier, step),
        market_value_max=round_to_nearest(best_price * config.market_max_multiplier, step),
        ideal_listing_price=round_to_nearest(best_price * config.listing_multiplier, step),
        expected_final_deal=best_price,
        advisory=config.advisory,
    )
