"""FastAPI server exposing the outfit matching and closet analytics endpoints."""

from functools import lru_cache

from fastapi import Depends, FastAPI, HTTPException, Request

from closet_app.app import ClosetIQApp
from closet_app.logging_config import request_correlation
from logic.validation import ClosetItemsRequest, CostPerWearRequest, OutfitMatchRequest

CORRELATION_HEADER = "X-Correlation-ID"

app = FastAPI(title="ClosetIQ", version="0.1.0")


@app.middleware("http")
async def correlation_middleware(request: Request, call_next):
    """Scope one correlation id to the request and echo it back to the client."""

    with request_correlation(request.headers.get(CORRELATION_HEADER)) as correlation_id:
        response = await call_next(request)
    response.headers[CORRELATION_HEADER] = correlation_id
    return response


@lru_cache(maxsize=1)
def get_closet_app() -> ClosetIQApp:
    """Build the app container once per process."""

    return ClosetIQApp()


def _dump_items(request: OutfitMatchRequest | ClosetItemsRequest) -> list:
    return [item.model_dump() for item in request.items]


@app.get("/healthz")
async def healthcheck(closet_app: ClosetIQApp = Depends(get_closet_app)) -> dict:
    """Lightweight readiness probe."""

    return {
        "status": "ok",
        "service": "closetiq",
        "environment": closet_app.config.environment or "local",
        "explanation_backend": closet_app.explanation_provider.name,
    }


@app.post("/outfits/matches")
async def outfit_matches(
    request: OutfitMatchRequest, closet_app: ClosetIQApp = Depends(get_closet_app)
) -> dict:
    """Rank outfits from the posted closet for an occasion and optional season."""

    try:
        matches = closet_app.closet_tools.generate_outfit_matches(
            items=_dump_items(request),
            occasion=request.occasion,
            season=request.season,
            explain=request.explain,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"occasion": request.occasion, "season": request.season, "matches": matches}


@app.post("/closet/analytics")
async def closet_analytics(
    request: ClosetItemsRequest, closet_app: ClosetIQApp = Depends(get_closet_app)
) -> dict:
    """Return usage, distribution and sustainability statistics."""

    return closet_app.closet_tools.calculate_closet_analytics(items=_dump_items(request))


@app.post("/closet/sustainability")
async def sustainability(
    request: ClosetItemsRequest, closet_app: ClosetIQApp = Depends(get_closet_app)
) -> dict:
    score = closet_app.closet_tools.calculate_sustainability_score(items=_dump_items(request))
    return {"sustainability_score": score}


@app.post("/items/cost-per-wear")
async def cost_per_wear(
    request: CostPerWearRequest, closet_app: ClosetIQApp = Depends(get_closet_app)
) -> dict:
    try:
        return closet_app.closet_tools.calculate_cost_per_wear(item=request.item.model_dump())
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def get_app() -> FastAPI:
    """Expose the FastAPI instance for ASGI servers."""

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.api:app", host="0.0.0.0", port=8080, reload=False)
