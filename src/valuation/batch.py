from __future__ import annotations

import pandas as pd

from valuation.config import DEFAULT_CONFIG, ValuationConfig
from valuation.engine import calculate_valuation
from valuation.forms import assessment_from_form


def value_frame(
    frame: pd.DataFrame, current_year: int, config: ValuationConfig = DEFAULT_CONFIG
) -> pd.DataFrame:
    """Value every row of a frame of flat form submissions.

    Returns one row of flat result columns per input row, on the input index.
    A row that fails validation raises and no frame is returned.
    """
    rows = []
    for record in frame.to_dict(orient="records"):
        assessment = assessment_from_form(record, current_year=current_year)
        rows.append(calculate_valuation(assessment, config).as_dict())
    return pd.DataFrame(rows, index=frame.index)
