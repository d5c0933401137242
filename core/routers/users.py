"""
Users API Router

Registration is for anonymous callers; every /me endpoint acts on the
authenticated caller.
"""

from fastapi import APIRouter, Depends, Response

from core.auth import AuthorizedRoute, get_current_user
from core.models import UserRegisterData, UserResponseData, UserUpdateData
from core.routers.deps import get_user_service
from core.services.domains import UserService
from core.services.models import User

router = APIRouter(prefix="/api/users", tags=["users"], route_class=AuthorizedRoute)


@router.post("", status_code=201)
async def register_user(
    data: UserRegisterData,
    service: UserService = Depends(get_user_service),
):
    user_id = await service.register_user(data)
    return Response(status_code=201, headers={"Location": f"/api/users/{user_id}"})


@router.get("/me", response_model=UserResponseData)
async def get_current_user_profile(user: User = Depends(get_current_user)):
    return UserResponseData.of(user)


@router.patch("/me")
async def update_current_user(
    data: UserUpdateData,
    user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    await service.update_user(user, data)
    return Response(status_code=200)


@router.delete("/me", status_code=204)
async def delete_current_user(
    user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    await service.delete_user(user)
    return Response(status_code=204)
