from __future__ import annotations

from dataclasses import dataclass


class InvalidLoanError(ValueError):
    pass


@dataclass(frozen=True)
class EmiBreakdown:
    loan_amount: float
    emi: float
    total_interest: float
    total_payment: float
    daily_payment: float
    yearly_payment: float


def _check_loan(car_price: float, down_payment: float, annual_interest_pct: float, tenure_years: int) -> None:
    if not 10_000 <= car_price <= 5_000_000:
        raise InvalidLoanError("car_price must be between 10,000 and 5,000,000")
    if down_payment < 0:
        raise InvalidLoanError("down_payment cannot be negative")
    if down_payment > car_price:
        raise InvalidLoanError("Down payment cannot exceed car price")
    if not 0 <= annual_interest_pct <= 20:
        raise InvalidLoanError("annual_interest_pct must be between 0% and 20%")
    if not 1 <= tenure_years <= 7:
        raise InvalidLoanError("tenure_years must be between 1 and 7 years")


def calculate_emi(
    car_price: float,
    down_payment: float,
    annual_interest_pct: float,
    tenure_years: int,
) -> EmiBreakdown:
    """Equated monthly instalment for a car loan with a down payment."""
    _check_loan(car_price, down_payment, annual_interest_pct, tenure_years)

    principal = car_price - down_payment
    rate = annual_interest_pct / 100 / 12
    months = tenure_years * 12

    if principal <= 0:
        return EmiBreakdown(principal, 0.0, 0.0, 0.0, 0.0, 0.0)

    if rate > 0:
        growth = (1 + rate) ** months
        emi = principal * rate * growth / (growth - 1)
        total_payment = emi * months
    else:
        emi = principal / months
        total_payment = principal

    return EmiBreakdown(
        loan_amount=principal,
        emi=emi,
        total_interest=total_payment - principal,
        total_payment=total_payment,
        daily_payment=total_payment / (tenure_years * 365),
        yearly_payment=emi * 12,
    )
