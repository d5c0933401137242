"""Session API Router - exchanges credentials for an access token."""

from fastapi import APIRouter, Depends

from core.auth import AuthenticationService, AuthorizedRoute
from core.models import SessionRequestData, SessionResponseData
from core.routers.deps import get_auth_service

router = APIRouter(prefix="/api/session", tags=["session"], route_class=AuthorizedRoute)


@router.post("", status_code=201, response_model=SessionResponseData)
async def login(
    data: SessionRequestData,
    auth: AuthenticationService = Depends(get_auth_service),
):
    """Log in with email and password"""
    token = await auth.login(str(data.email), data.password)
    return SessionResponseData(access_token=token)
