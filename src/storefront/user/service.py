"""User service: registration, sessions, profile and addresses."""

import json
from http import HTTPStatus

from protean.utils.globals import current_domain

from storefront.auth.identity import Identity
from storefront.auth.passwords import hash_password, verify_password
from storefront.auth.revocation import RevocationCache
from storefront.auth.tokens import create_access_token
from storefront.config import AuthSettings
from storefront.shared.errors import NotFoundError, UnauthorizedError
from storefront.shared.policy import Action, authorize
from storefront.shared.response import ServiceResponse, service_operation
from storefront.user.addresses import AddAddress, RemoveAddress
from storefront.user.profile import UpdateProfile
from storefront.user.registration import RegisterUser
from storefront.user.session import EndSession, StartSession
from storefront.user.user import User
from storefront.user.views import AddressView, LoginResult, TokenPair, UserProfile
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class UserService:
    def __init__(self, settings: AuthSettings, revocations: RevocationCache):
        self.settings = settings
        self.revocations = revocations

    @property
    def repository(self):
        return current_domain.repository_for(User)

    def _user(self, user_id) -> User:
        user = self.repository.get_or_none(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    # -------------------------------------------------------------------
    # Registration and sessions
    # -------------------------------------------------------------------
    @service_operation("An error occurred while creating user.")
    def register(self, firstname, lastname, email, password, mobilenumber=None, avatar=None) -> ServiceResponse:
        command = RegisterUser(
            firstname=firstname,
            lastname=lastname,
            email=email,
            password_hash=hash_password(password),
            mobilenumber=mobilenumber,
            avatar=avatar,
        )
        user_id = current_domain.process(command, asynchronous=False)

        return ServiceResponse.ok(
            "User created",
            UserProfile.model_validate(self._user(user_id)),
            HTTPStatus.CREATED,
        )

    @service_operation("An error occurred while logging in user.")
    def login(self, email, password) -> ServiceResponse:
        user = self.repository.find_by_email(email)
        if user is None:
            raise NotFoundError("User not found")
        if not verify_password(password, user.password):
            raise UnauthorizedError("Invalid password")

        access = create_access_token(str(user.id), self.settings)
        refresh_token = current_domain.process(StartSession(user_id=user.id), asynchronous=False)

        logger.info("User logged in", user_id=str(user.id))
        return ServiceResponse.ok(
            "User logged in",
            LoginResult(
                id=str(user.id),
                name=user.name,
                email=user.email,
                role=user.role,
                token=access.token,
                refresh_token=refresh_token,
                expires_at=access.expires_at,
                created_at=user.created_at,
                updated_at=user.updated_at,
            ),
        )

    @service_operation("An error occurred while refreshing token.")
    def refresh(self, refresh_token) -> ServiceResponse:
        user = self.repository.find_by_refresh_token(refresh_token) if refresh_token else None
        if user is None:
            raise UnauthorizedError("Invalid refresh token")

        access = create_access_token(str(user.id), self.settings)
        return ServiceResponse.ok("Token refreshed", TokenPair(token=access.token, expires_at=access.expires_at))

    @service_operation("An error occurred while logging out user.")
    def logout(self, identity: Identity) -> ServiceResponse:
        current_domain.process(EndSession(user_id=identity.user_id), asynchronous=False)

        self.revocations.put(identity.token, "revoked", ttl=identity.remaining_validity())
        logger.info("User logged out", user_id=identity.user_id)
        return ServiceResponse.ok("User logged out")

    # -------------------------------------------------------------------
    # Profiles
    # -------------------------------------------------------------------
    @service_operation("An error occurred while retrieving users.")
    def find_all(self, identity: Identity) -> ServiceResponse:
        authorize(identity, Action.LIST_USERS)
        users = self.repository.find_all()
        if not users:
            raise NotFoundError("No Users found")
        return ServiceResponse.ok("Users found", [UserProfile.model_validate(user) for user in users])

    @service_operation("An error occurred while finding user.")
    def find_by_id(self, identity: Identity, user_id: str) -> ServiceResponse:
        authorize(identity, Action.VIEW_USER, owner_id=user_id)
        return ServiceResponse.ok("User found", UserProfile.model_validate(self._user(user_id)))

    @service_operation("An error occurred while updating user.")
    def update_profile(self, identity: Identity, **changes) -> ServiceResponse:
        self._user(identity.user_id)
        current_domain.process(
            UpdateProfile(user_id=identity.user_id, changes=json.dumps(changes)),
            asynchronous=False,
        )
        return ServiceResponse.ok("User updated", UserProfile.model_validate(self._user(identity.user_id)))

    # -------------------------------------------------------------------
    # Addresses
    # -------------------------------------------------------------------
    @service_operation("An error occurred while retrieving addresses.")
    def list_addresses(self, identity: Identity) -> ServiceResponse:
        user = self._user(identity.user_id)
        return ServiceResponse.ok(
            "Addresses retrieved",
            [AddressView.model_validate(address) for address in user.ordered_addresses],
        )

    @service_operation("An error occurred while adding address.")
    def add_address(self, identity: Identity, **fields) -> ServiceResponse:
        self._user(identity.user_id)
        address_id = current_domain.process(AddAddress(user_id=identity.user_id, **fields), asynchronous=False)

        address = self._user(identity.user_id).address(address_id)
        return ServiceResponse.ok("Address added", AddressView.model_validate(address), HTTPStatus.CREATED)

    @service_operation("An error occurred while removing address.")
    def remove_address(self, identity: Identity, address_id: str) -> ServiceResponse:
        current_domain.process(RemoveAddress(user_id=identity.user_id, address_id=address_id), asynchronous=False)
        return ServiceResponse.ok("Address removed")
