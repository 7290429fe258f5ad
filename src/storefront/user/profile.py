"""Profile updates: command and handler."""

import json

from protean import handle
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.user.user import User


@storefront.command(part_of="User")
class UpdateProfile:
    user_id = Identifier(required=True)
    changes = Text(required=True, sanitize=False)  # JSON: only the fields that were sent


@storefront.command_handler(part_of=User)
class UpdateProfileHandler:
    @handle(UpdateProfile)
    def update_profile(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        user.update_profile(**json.loads(command.changes))
        repo.add(user)
