"""Session endpoints and the session requirement for mutating endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from sugar_tracker.api.models import LoginRequest, RegisterRequest

if TYPE_CHECKING:
    from sugar_tracker.containers import AppContainer
    from sugar_tracker.domain.models import UserRecord

router = APIRouter(prefix="/session", tags=["session"])


async def require_session(request: Request) -> None:
    """Reject requests made while nobody is logged in."""
    container: AppContainer = request.app.state.container
    if not container.session_service.is_authenticated:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("")
async def current_session(request: Request) -> dict[str, object]:
    """Return the logged-in user, if any."""
    container: AppContainer = request.app.state.container
    service = container.session_service
    return {
        "user": _serialize_user(service.current),
        "authenticated": service.is_authenticated,
        "loading": service.loading,
    }


@router.post("/login")
async def login(payload: LoginRequest, request: Request) -> dict[str, object]:
    """Start a local session."""
    container: AppContainer = request.app.state.container
    result = await container.session_service.login(payload.email, payload.password)
    return {"user": _serialize_user(result.value), "persisted": result.persisted}


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(payload: RegisterRequest, request: Request) -> dict[str, object]:
    """Create a local user and start a session."""
    container: AppContainer = request.app.state.container
    result = await container.session_service.register(
        payload.username, payload.email, payload.password
    )
    return {"user": _serialize_user(result.value), "persisted": result.persisted}


@router.post("/logout")
async def logout(request: Request) -> dict[str, object]:
    """End the current session."""
    container: AppContainer = request.app.state.container
    result = await container.session_service.logout()
    return {"user": None, "persisted": result.persisted}


def _serialize_user(user: UserRecord | None) -> dict[str, object] | None:
    if user is None:
        return None
    return {"id": user.id, "username": user.username, "email": user.email}
