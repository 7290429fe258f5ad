"""User registration: command and handler."""

from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.shared.errors import ConflictError
from storefront.user.user import Role, User
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="User")
class RegisterUser:
    """Create an account. Carries the password hash, never the plaintext."""

    firstname = String(required=True, max_length=100)
    lastname = String(required=True, max_length=100)
    email = String(required=True, max_length=254)
    password_hash = String(required=True, max_length=255, sanitize=False)
    mobilenumber = String(max_length=20)
    avatar = String(max_length=500, sanitize=False)
    role = String(max_length=20, default=Role.CUSTOMER.value)


@storefront.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.find_by_email(command.email) is not None:
            raise ConflictError("User already exists")

        user = User.register(
            firstname=command.firstname,
            lastname=command.lastname,
            email=command.email,
            password_hash=command.password_hash,
            mobilenumber=command.mobilenumber,
            avatar=command.avatar,
            role=command.role or Role.CUSTOMER.value,
        )
        repo.add(user)

        logger.info("User registered", user_id=str(user.id), role=user.role)
        return str(user.id)
