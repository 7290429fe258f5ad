"""FastAPI endpoints for users: registration, sessions, profiles and addresses."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from storefront.api.dependencies import get_identity, get_user_service
from storefront.api.envelope import respond
from storefront.api.schemas import (
    AddressRequest,
    LoginRequest,
    RefreshRequest,
    RegisterRequest,
    UpdateProfileRequest,
)
from storefront.auth.identity import Identity
from storefront.user.service import UserService

router = APIRouter(prefix="/users", tags=["users"])


# --- Sessions ---


@router.post("/register", status_code=201)
async def register(body: RegisterRequest, service: UserService = Depends(get_user_service)) -> JSONResponse:
    return respond(service.register(**body.model_dump()))


@router.post("/login")
async def login(body: LoginRequest, service: UserService = Depends(get_user_service)) -> JSONResponse:
    return respond(service.login(body.email, body.password))


@router.post("/refresh")
async def refresh(body: RefreshRequest, service: UserService = Depends(get_user_service)) -> JSONResponse:
    return respond(service.refresh(body.refresh_token))


@router.post("/logout")
async def logout(
    identity: Identity = Depends(get_identity),
    service: UserService = Depends(get_user_service),
) -> JSONResponse:
    return respond(service.logout(identity))


# --- Own profile ---


@router.get("/me")
async def get_me(
    identity: Identity = Depends(get_identity),
    service: UserService = Depends(get_user_service),
) -> JSONResponse:
    return respond(service.find_by_id(identity, identity.user_id))


@router.patch("/me")
async def update_me(
    body: UpdateProfileRequest,
    identity: Identity = Depends(get_identity),
    service: UserService = Depends(get_user_service),
) -> JSONResponse:
    return respond(service.update_profile(identity, **body.model_dump(exclude_unset=True)))


@router.get("/me/addresses")
async def list_addresses(
    identity: Identity = Depends(get_identity),
    service: UserService = Depends(get_user_service),
) -> JSONResponse:
    return respond(service.list_addresses(identity))


@router.post("/me/addresses", status_code=201)
async def add_address(
    body: AddressRequest,
    identity: Identity = Depends(get_identity),
    service: UserService = Depends(get_user_service),
) -> JSONResponse:
    return respond(service.add_address(identity, **body.model_dump()))


@router.delete("/me/addresses/{address_id}")
async def remove_address(
    address_id: str,
    identity: Identity = Depends(get_identity),
    service: UserService = Depends(get_user_service),
) -> JSONResponse:
    return respond(service.remove_address(identity, address_id))


# --- Administration ---


@router.get("")
async def list_users(
    identity: Identity = Depends(get_identity),
    service: UserService = Depends(get_user_service),
) -> JSONResponse:
    return respond(service.find_all(identity))


@router.get("/{user_id}")
async def get_user(
    user_id: str,
    identity: Identity = Depends(get_identity),
    service: UserService = Depends(get_user_service),
) -> JSONResponse:
    return respond(service.find_by_id(identity, user_id))
