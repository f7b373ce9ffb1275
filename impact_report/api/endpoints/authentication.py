"""Authentication endpoints."""
from fastapi import APIRouter, Depends

from impact_report.core.auth import create_access_token
from impact_report.core.mongodb import get_store
from impact_report.schemas.auth import LoginRequest, LoginResponse
from impact_report.services.user_service import UserService

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
async def login(request: LoginRequest, store=Depends(get_store)):
    """
    Check email and password and return the user's profile with an access token.

    There is no server-side session: the token must accompany every write.
    """
    user = await UserService.authenticate(store, request.email, request.password)

    return LoginResponse(
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        admin=user.admin,
        access_token=create_access_token(user.email, user.admin),
    )
