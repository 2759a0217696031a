"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/cache/stats", dependencies=[Depends(require_admin)])
async def cache_stats(request: Request) -> dict[str, int]:
    """Return response cache entry counts."""
    container: AppContainer = request.app.state.container
    stats = await container.response_cache.stats()
    return {"total": stats.total, "expired": stats.expired}


@router.post("/cache/purge", dependencies=[Depends(require_admin)])
async def purge_cache(request: Request) -> dict[str, int]:
    """Delete expired response cache entries."""
    container: AppContainer = request.app.state.container
    removed = await container.response_cache.purge_expired()
    return {"removed": removed}


@router.post("/cache/clear", dependencies=[Depends(require_admin)])
async def clear_cache(request: Request) -> dict[str, str]:
    """Delete every response cache entry."""
    container: AppContainer = request.app.state.container
    await container.response_cache.clear()
    return {"status": "ok"}


@router.get("/queue", dependencies=[Depends(require_admin)])
async def queue_status(request: Request) -> dict[str, object]:
    """Return the request queue state."""
    container: AppContainer = request.app.state.container
    queue = container.request_queue
    return {"pending": queue.pending_count(), "processing": queue.is_processing()}
