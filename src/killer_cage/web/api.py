"""FastAPI app exposing the cage engine."""

from __future__ import annotations

import os
from functools import lru_cache

from fastapi import FastAPI, HTTPException, Path, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, model_validator

from killer_cage import __version__
from killer_cage.engine import DEFAULT_MAX_CELL_VALUE, InvalidCageError

from .service import CageService

MAX_REQUEST_CELL_VALUE = 16


class CageModel(BaseModel):
    """Cage configuration echoed back with each response."""

    max_cell_value: int
    cell_count: int


class CombinationsRequest(BaseModel):
    """Request payload for the combinations endpoint."""

    cell_count: int = Field(ge=0, le=MAX_REQUEST_CELL_VALUE)
    total: int | None = None
    max_cell_value: int = Field(default=DEFAULT_MAX_CELL_VALUE, ge=0, le=MAX_REQUEST_CELL_VALUE)


class BoundsResponse(BaseModel):
    """Minimum and maximum totals for a cage size."""

    minimum: int
    maximum: int


class CombinationsResponse(BaseModel):
    """Response payload for the combinations endpoint."""

    cage: CageModel
    minimum: int
    maximum: int
    total: int | None = None
    solutions: list[list[int]] | None = None

    @model_validator(mode="after")
    def _validate_solutions(self) -> CombinationsResponse:
        for numbers in self.solutions or []:
            if len(numbers) != self.cage.cell_count:
                raise ValueError("each solution must include cell_count values.")
            if any(left >= right for left, right in zip(numbers, numbers[1:])):
                raise ValueError("solution values must be strictly ascending.")
        return self


app = FastAPI(title="Killer Cage", version=__version__)


def get_cors_origins() -> list[str]:
    """Resolve allowed CORS origins from env."""

    raw = os.getenv("CORS_ALLOW_ORIGINS", "*").strip()
    if raw == "*":
        return ["*"]
    return [item.strip() for item in raw.split(",") if item.strip()]


app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def get_service() -> CageService:
    """Return singleton cage service."""

    return CageService()


@app.post("/api/combinations", response_model=CombinationsResponse)
def combinations(payload: CombinationsRequest) -> CombinationsResponse:
    """List the combinations filling a cage."""

    try:
        result = get_service().describe(
            cell_count=payload.cell_count,
            total=payload.total,
            max_cell_value=payload.max_cell_value,
        )
    except InvalidCageError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return CombinationsResponse.model_validate(result)


@app.get("/api/bounds/{cell_count}", response_model=BoundsResponse)
def bounds(
    cell_count: int = Path(ge=0, le=MAX_REQUEST_CELL_VALUE),
    max_cell_value: int = Query(default=DEFAULT_MAX_CELL_VALUE, ge=0, le=MAX_REQUEST_CELL_VALUE),
) -> BoundsResponse:
    """Return the minimum and maximum totals for a cage size."""

    try:
        result = get_service().bounds(cell_count=cell_count, max_cell_value=max_cell_value)
    except InvalidCageError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return BoundsResponse.model_validate(result)
