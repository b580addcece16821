"""
Delivery Calculator API - FastAPI service exposing the order breakdown.
"""
import logging
from dataclasses import asdict
from typing import Any, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from ..config.settings import get_settings
from ..engine import PricingCalculator, OrderInput
from ..errors import InvalidInputError
from ..ui.render import render_html, render_lines
from .. import __version__

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Delivery Calculator API",
    description="Order breakdown with discount, delivery fee and tax",
    version=__version__,
)

# Enable CORS for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

calculator = PricingCalculator()


class CalcRequest(BaseModel):
    """Raw form values; anything non-numeric is handled by OrderInput.from_raw."""
    unit_price: Optional[Any] = None
    quantity: Optional[Any] = None
    discount_percent: Optional[Any] = None
    distance_km: Optional[Any] = None


def _build_input(req: CalcRequest, strict: bool) -> OrderInput:
    try:
        return OrderInput.from_raw(req.model_dump(), strict=strict)
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail={"field": e.field, "message": str(e)})


@app.get("/")
async def root():
    return {"status": "online", "message": "Delivery Calculator API Active"}


@app.get("/settings")
async def get_pricing_settings():
    return get_settings().pricing_constants()


@app.post("/calculate")
async def calculate(req: CalcRequest, strict: bool = False):
    order = _build_input(req, strict)
    try:
        breakdown = calculator.compute_breakdown(order)
        return {
            "input": asdict(order),
            "breakdown": breakdown.to_dict(),
            "lines": render_lines(breakdown, calculator.settings),
        }
    except Exception as e:
        logger.exception("Calculation failed for %s", order)
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/calculate/html", response_class=HTMLResponse)
async def calculate_html(req: CalcRequest, strict: bool = False):
    order = _build_input(req, strict)
    try:
        breakdown = calculator.compute_breakdown(order)
        return render_html(breakdown, calculator.settings)
    except Exception as e:
        logger.exception("Rendering failed for %s", order)
        raise HTTPException(status_code=500, detail=str(e))
