"""Login sessions: the refresh token persisted on the account."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.auth.tokens import new_refresh_token
from storefront.domain import storefront
from storefront.user.user import User


@storefront.command(part_of="User")
class StartSession:
    user_id = Identifier(required=True)


@storefront.command(part_of="User")
class EndSession:
    user_id = Identifier(required=True)


@storefront.command_handler(part_of=User)
class ManageSessionsHandler:
    @handle(StartSession)
    def start_session(self, command):
        """Issue a fresh refresh token and return it.

        The token is generated here so it never travels inside a stored command.
        """
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        refresh_token = new_refresh_token()
        user.start_session(refresh_token)
        repo.add(user)
        return refresh_token

    @handle(EndSession)
    def end_session(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get_or_none(command.user_id)
        if user is None:
            return
        user.end_session()
        repo.add(user)
