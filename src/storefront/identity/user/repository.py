"""Repository for the User aggregate."""

from protean.exceptions import ObjectNotFoundError

from storefront.domain import storefront
from storefront.identity.user.user import User, UserRole
from storefront.shared.queries import fetch_all


@storefront.repository(part_of=User)
class UserRepository:
    def find(self, user_id) -> User | None:
        try:
            return self.get(user_id)
        except ObjectNotFoundError:
            return None

    def find_by_role(self, role: str) -> list[User]:
        return fetch_all(self._dao.query.filter(role=role))

    def customers(self) -> list[User]:
        return self.find_by_role(UserRole.CUSTOMER.value)
