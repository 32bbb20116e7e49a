from fastapi import APIRouter, Depends, HTTPException, Response

from rental.api.v1 import presenters
from rental.api.v1.schemas import (
    LoginRequestSchema,
    LogoutRequestSchema,
    ProfileUpdateRequestSchema,
    RegisterRequestSchema,
    SocialLoginRequestSchema,
    UserProfileSchema,
)
from rental.application.exceptions import AuthError, InvalidCredentialsError, UserNotFoundError
from rental.application.ports.auth_gateway import AuthGatewayPort
from rental.wiring.dependencies import get_auth_gateway

router = APIRouter()


def _status_for(error: AuthError) -> int:
    if isinstance(error, InvalidCredentialsError):
        return 401
    if isinstance(error, UserNotFoundError):
        return 404
    return 400


@router.post("/auth/register", response_model=UserProfileSchema)
def register(req: RegisterRequestSchema, gateway: AuthGatewayPort = Depends(get_auth_gateway)):
    try:
        profile = gateway.register(req.first_name, req.last_name, req.email, req.password)
    except AuthError as e:
        raise HTTPException(status_code=_status_for(e), detail=str(e))
    return presenters.user_profile(profile)


@router.post("/auth/login", response_model=UserProfileSchema)
def login(req: LoginRequestSchema, gateway: AuthGatewayPort = Depends(get_auth_gateway)):
    try:
        profile = gateway.login(req.email, req.password)
    except AuthError as e:
        raise HTTPException(status_code=_status_for(e), detail=str(e))
    return presenters.user_profile(profile)


@router.post("/auth/social-login", response_model=UserProfileSchema)
def social_login(req: SocialLoginRequestSchema, gateway: AuthGatewayPort = Depends(get_auth_gateway)):
    try:
        profile = gateway.social_login(req.provider, req.email, req.first_name, req.last_name, req.photo_url)
    except AuthError as e:
        raise HTTPException(status_code=_status_for(e), detail=str(e))
    return presenters.user_profile(profile)


@router.post("/auth/logout", status_code=204)
def logout(req: LogoutRequestSchema, gateway: AuthGatewayPort = Depends(get_auth_gateway)):
    gateway.logout(req.uid)
    return Response(status_code=204)


@router.post("/auth/profile", response_model=UserProfileSchema)
def update_profile(req: ProfileUpdateRequestSchema, gateway: AuthGatewayPort = Depends(get_auth_gateway)):
    try:
        profile = gateway.update_profile(req.uid, req.updates)
    except AuthError as e:
        raise HTTPException(status_code=_status_for(e), detail=str(e))
    return presenters.user_profile(profile)
