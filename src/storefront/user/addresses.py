"""Address book management: commands and handler."""

from protean import handle
from protean.fields import Boolean, Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.shared.errors import NotFoundError
from storefront.user.user import User


@storefront.command(part_of="User")
class AddAddress:
    user_id = Identifier(required=True)
    firstname = String(required=True, max_length=100)
    lastname = String(required=True, max_length=100)
    street = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    state = String(required=True, max_length=100)
    zipcode = String(required=True, max_length=20)
    country = String(required=True, max_length=100)
    phone = String(required=True, max_length=20)
    is_default = Boolean(default=False)


@storefront.command(part_of="User")
class RemoveAddress:
    user_id = Identifier(required=True)
    address_id = Identifier(required=True)


@storefront.command_handler(part_of=User)
class ManageAddressesHandler:
    @handle(AddAddress)
    def add_address(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        address = user.add_address(
            firstname=command.firstname,
            lastname=command.lastname,
            street=command.street,
            city=command.city,
            state=command.state,
            zipcode=command.zipcode,
            country=command.country,
            phone=command.phone,
            is_default=bool(command.is_default),
        )
        repo.add(user)
        return str(address.id)

    @handle(RemoveAddress)
    def remove_address(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get_or_none(command.user_id)
        if user is None or user.remove_address(command.address_id) is None:
            raise NotFoundError("Address not found")
        repo.add(user)
