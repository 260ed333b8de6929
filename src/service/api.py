from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any

from fastapi import Body, FastAPI, HTTPException, Request, Response, status
from pydantic import BaseModel, Field

from service.logging_config import configure_logging, correlation_id, new_correlation_id
from service.settings import ServiceSettings
from valuation.data_models import (
    AdditionalFeatures,
    BodyType,
    CategoryDepreciation,
    ConfidenceBand,
    DentCount,
    Documents,
    Electrical,
    EngineMechanical,
    Exterior,
    Fluids,
    FuelType,
    InsuranceType,
    Interior,
    Ownership,
    PriceCheckReason,
    PriceTrail,
    RcStatus,
    RustExtent,
    Safety,
    ScratchCount,
    Transmission,
    Tyres,
    UsageHistory,
    ValuationResult,
    VehicleAssessment,
    YesNo,
)
from valuation.emi import InvalidLoanError, calculate_emi
from valuation.engine import InvalidAssessmentError, calculate_valuation
from valuation.forms import assessment_from_form

logger = logging.getLogger(__name__)


# ── Request / Response Models ───────────────────────────────────────

class ValuationRequest(BaseModel):
    price_check_reason: PriceCheckReason = "price_check"
    make: str = Field(min_length=1)
    model: str = Field(min_length=1)
    variant: str = Field(min_length=1)
    body_type: BodyType
    fuel_type: FuelType
    transmission: Transmission
    manufacture_year: int
    registration_year: int
    registration_state: str = Field(min_length=1)
    ownership: Ownership
    rc_status: RcStatus
    insurance: InsuranceType
    hypothecation: YesNo
    expected_price: float = Field(gt=0)
    current_year: int | None = None
    usage: UsageHistory
    engine_mechanical: EngineMechanical
    fluids: Fluids
    exterior: Exterior
    interior: Interior
    electrical: Electrical
    tyres: Tyres
    safety: Safety
    documents: Documents
    additional: AdditionalFeatures
    scratches: ScratchCount = "0"
    dents: DentCount = "0"
    rust_areas: RustExtent = "none"

    def to_assessment(self, default_year: int) -> VehicleAssessment:
        values = {name: getattr(self, name) for name in type(self).model_fields if name != "current_year"}
        return VehicleAssessment(current_year=self.current_year or default_year, **values)


class BreakdownItem(BaseModel):
    category: str
    percentage: float


class ValuationResponse(BaseModel):
    best_price: int
    seller_protection_applied: bool
    good_car_bonus_applied: bool
    trail: PriceTrail
    depreciation: CategoryDepreciation
    band: ConfidenceBand
    breakdown: list[BreakdownItem]

    @classmethod
    def from_result(cls, result: ValuationResult) -> "ValuationResponse":
        return cls(
            best_price=result.best_price,
            seller_protection_applied=result.seller_protection_applied,
            good_car_bonus_applied=result.good_car_bonus_applied,
            trail=result.trail,
            depreciation=result.depreciation,
            band=result.band,
            breakdown=[BreakdownItem(category=c, percentage=p) for c, p in result.breakdown()],
        )


class EmiRequest(BaseModel):
    car_price: float = Field(default=1_000_000, ge=10_000, le=5_000_000)
    down_payment: float = Field(default=100_000, ge=0)
    annual_interest_pct: float = Field(default=9, ge=0, le=20)
    tenure_years: int = Field(default=5, ge=1, le=7)


class EmiResponse(BaseModel):
    loan_amount: float
    emi: float
    total_interest: float
    total_payment: float
    daily_payment: float
    yearly_payment: float


class HealthResponse(BaseModel):
    status: str


# ── App Factory ─────────────────────────────────────────────────────

def create_app() -> FastAPI:
    settings = ServiceSettings()
    configure_logging(level=settings.log_level, fmt=settings.log_format, service_name=settings.service_name)

    counters: dict[str, int] = defaultdict(int)

    app = FastAPI(title="Used Car Valuation API", version="1.0.0")

    @app.middleware("http")
    async def correlation_id_middleware(request: Request, call_next: Any) -> Response:
        cid = request.headers.get("X-Correlation-ID") or new_correlation_id()
        correlation_id.set(cid)
        response = await call_next(request)
        response.headers["X-Correlation-ID"] = cid
        return response

    def _value(assessment: VehicleAssessment) -> ValuationResponse:
        try:
            result = calculate_valuation(assessment)
        except InvalidAssessmentError as exc:
            counters["valuations_rejected"] += 1
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except Exception as exc:
            counters["valuation_failures"] += 1
            logger.exception("Valuation failed for %s %s", assessment.make, assessment.model)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to calculate car valuation.",
            ) from exc

        counters["valuations"] += 1
        if result.seller_protection_applied:
            counters["seller_protection_applied"] += 1
        if result.good_car_bonus_applied:
            counters["good_car_bonus_applied"] += 1
        return ValuationResponse.from_result(result)

    # ── Valuation ───────────────────────────────────────────────────

    @app.post("/valuation", response_model=ValuationResponse)
    async def valuation(payload: ValuationRequest) -> ValuationResponse:
        return _value(payload.to_assessment(settings.current_year()))

    @app.post("/valuation/form", response_model=ValuationResponse)
    async def valuation_from_form(
        form: dict[str, Any] = Body(...), current_year: int | None = None
    ) -> ValuationResponse:
        try:
            assessment = assessment_from_form(form, current_year=current_year or settings.current_year())
        except InvalidAssessmentError as exc:
            counters["valuations_rejected"] += 1
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return _value(assessment)

    @app.post("/emi", response_model=EmiResponse)
    async def emi(payload: EmiRequest) -> EmiResponse:
        try:
            breakdown = calculate_emi(
                payload.car_price, payload.down_payment, payload.annual_interest_pct, payload.tenure_years
            )
        except InvalidLoanError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return EmiResponse(**vars(breakdown))

    # ── Health / Metrics ────────────────────────────────────────────

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/metrics")
    async def get_metrics() -> dict[str, Any]:
        return {"counters": dict(counters)}

    return app


app = create_app()
