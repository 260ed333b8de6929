import pandas as pd
import pytest

from conftest import CURRENT_YEAR, flat_form, make_assessment, make_wrecked_assessment
from valuation.batch import value_frame
from valuation.engine import InvalidAssessmentError
from valuation.forms import assessment_from_form, snake_case


@pytest.mark.parametrize(
    "key,expected",
    [
        ("paintQuality", "paint_quality"),
        ("rcBook", "rc_book"),
        ("reverseParkingSensor", "reverse_parking_sensor"),
        ("rust_areas", "rust_areas"),
        ("abs", "abs"),
    ],
)
def test_snake_case(key, expected):
    assert snake_case(key) == expected


def test_camel_case_form_round_trips_to_assessment():
    original = make_assessment()
    form = flat_form(original)
    form.update({"displayName": "Asha", "whatsappNumber": "9876543210", "vehicleNumber": ""})
    shaped = assessment_from_form(form, current_year=CURRENT_YEAR)
    assert shaped == original
    assert shaped.usage.odometer == 45_000


def test_form_coerces_numeric_strings():
    form = flat_form(make_assessment(), camel=False)
    form.update({"expected_price": "750000", "manufacture_year": "2020", "odometer": "61000"})
    shaped = assessment_from_form(form, current_year=CURRENT_YEAR)
    assert shaped.expected_price == 750_000.0
    assert shaped.manufacture_year == 2020
    assert shaped.usage.odometer == 61_000


def test_form_root_counters_default_when_absent():
    form = flat_form(make_assessment(), camel=False)
    for key in ("scratches", "dents", "rust_areas"):
        form.pop(key)
    shaped = assessment_from_form(form, current_year=CURRENT_YEAR)
    assert (shaped.scratches, shaped.dents, shaped.rust_areas) == ("0", "0", "none")


@pytest.mark.parametrize("odometer", ["45,000", "-5", "", "12.5", "abc"])
def test_form_rejects_non_digit_odometer(odometer):
    form = flat_form(make_assessment())
    form["odometer"] = odometer
    with pytest.raises(InvalidAssessmentError, match="Odometer"):
        assessment_from_form(form, current_year=CURRENT_YEAR)


def test_form_rejects_missing_field():
    form = flat_form(make_assessment())
    del form["gearbox"]
    with pytest.raises(InvalidAssessmentError, match="gearbox"):
        assessment_from_form(form, current_year=CURRENT_YEAR)


def test_form_rejects_non_numeric_price():
    form = flat_form(make_assessment())
    form["expectedPrice"] = "five lakh"
    with pytest.raises(InvalidAssessmentError, match="expected_price"):
        assessment_from_form(form, current_year=CURRENT_YEAR)


def test_form_rejects_fractional_future_year():
    form = flat_form(make_assessment())
    form["manufactureYear"] = CURRENT_YEAR + 0.9
    with pytest.raises(InvalidAssessmentError, match="manufacture_year"):
        assessment_from_form(form, current_year=CURRENT_YEAR)


def test_form_accepts_whole_float_year():
    form = flat_form(make_assessment())
    form["manufactureYear"] = float(CURRENT_YEAR - 3)
    assert assessment_from_form(form, current_year=CURRENT_YEAR).manufacture_year == CURRENT_YEAR - 3


@pytest.mark.parametrize("key", ["expectedPrice", "manufactureYear", "registrationYear"])
def test_form_rejects_boolean_numbers(key):
    form = flat_form(make_assessment())
    form[key] = True
    with pytest.raises(InvalidAssessmentError, match="must be numeric"):
        assessment_from_form(form, current_year=CURRENT_YEAR)


def test_value_frame():
    rows = [flat_form(make_assessment(), camel=False), flat_form(make_wrecked_assessment(), camel=False)]
    frame = pd.DataFrame(rows, index=["clean", "wrecked"])
    out = value_frame(frame, current_year=CURRENT_YEAR)
    assert list(out.index) == ["clean", "wrecked"]
    assert out.loc["clean", "best_price"] == 471_000
    assert out.loc["wrecked", "best_price"] == 80_000
    assert bool(out.loc["wrecked", "seller_protection_applied"]) is True
    assert (out["best_price"] % 1000 == 0).all()


def test_value_frame_raises_on_bad_row():
    bad = flat_form(make_assessment(), camel=False)
    bad["expected_price"] = 0
    frame = pd.DataFrame([flat_form(make_assessment(), camel=False), bad])
    with pytest.raises(InvalidAssessmentError):
        value_frame(frame, current_year=CURRENT_YEAR)
