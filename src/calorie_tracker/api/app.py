"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, Response

from calorie_tracker.api.admin import router as admin_router
from calorie_tracker.api.models import (
    AnalyzeRequest,
    ErrorResponse,
    NutritionResponse,
)
from calorie_tracker.app_logging import configure_logging
from calorie_tracker.containers import AppContainer
from calorie_tracker.domain.errors import AnalysisError, ErrorCode

_ERROR_STATUS = {
    ErrorCode.EMPTY_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.RATE_LIMIT: status.HTTP_429_TOO_MANY_REQUESTS,
    ErrorCode.TIMEOUT: status.HTTP_504_GATEWAY_TIMEOUT,
}

_ANALYZE_RESPONSES: dict[int | str, dict[str, object]] = {
    status.HTTP_204_NO_CONTENT: {"description": "Superseded by a newer request"},
    **{
        code: {"model": ErrorResponse}
        for code in (*_ERROR_STATUS.values(), status.HTTP_502_BAD_GATEWAY)
    },
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(debug=container.settings.debug)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        removed = await app.state.container.response_cache.purge_expired()
        logger.info("Purged %s expired API cache entries", removed)
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(admin_router)

    @app.exception_handler(AnalysisError)
    async def analysis_error_handler(
        request: Request, exc: AnalysisError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=_ERROR_STATUS.get(exc.code, status.HTTP_502_BAD_GATEWAY),
            content=exc.to_dict(),
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post(
        "/nutrition/analyze",
        response_model=NutritionResponse,
        responses=_ANALYZE_RESPONSES,
    )
    async def analyze(
        payload: AnalyzeRequest, request: Request
    ) -> NutritionResponse | Response:
        """Estimate calories and macros for a meal description.

        Requests that name a ``slot`` are debounced per slot; when a newer
        request for the same slot arrives first, this one returns 204.
        """
        state_container: AppContainer = request.app.state.container
        if payload.slot is None:
            estimate = await state_container.analysis_service.analyze(payload.text)
        else:
            superseding = state_container.superseding_analyzer
            estimate = await superseding.analyze(payload.slot, payload.text)
            if estimate is None:
                return Response(status_code=status.HTTP_204_NO_CONTENT)
        return NutritionResponse(**estimate.to_dict())

    return app
