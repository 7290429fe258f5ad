"""Repository for the User aggregate."""

from storefront.domain import storefront
from storefront.user.user import User


@storefront.repository(part_of=User)
class UserRepository:
    def find_by_email(self, email: str) -> User | None:
        return self.query.filter(email=email.lower()).all().first

    def find_by_refresh_token(self, refresh_token: str) -> User | None:
        return self.query.filter(refresh_token=refresh_token).all().first

    def find_all(self) -> list[User]:
        return self.query.order_by("created_at").limit(None).all().items
