"""User aggregate — shoppers and back-office staff known to the storefront.

Users are owned by the external identity provider; the storefront keeps a
local copy (upserted on every login) for order attribution, reviewer names
and the customer count on the admin dashboard.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, String, ValueObject

from storefront.domain import storefront
from storefront.identity.shared.email import EmailAddress
from storefront.identity.user.events import UserRegistered, UserRoleChanged


class UserRole(Enum):
    CUSTOMER = "customer"
    ADMIN = "admin"


@storefront.aggregate
class User:
    email: ValueObject(EmailAddress)
    first_name: String(max_length=100)
    last_name: String(max_length=100)
    profile_image_url: String(max_length=500)
    role: String(choices=UserRole, default=UserRole.CUSTOMER.value)
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def register(cls, user_id, email=None, first_name=None, last_name=None, profile_image_url=None, role=None):
        now = datetime.now(UTC)
        user = cls(
            id=user_id,
            email=EmailAddress(address=email) if email else None,
            first_name=first_name,
            last_name=last_name,
            profile_image_url=profile_image_url,
            role=role or UserRole.CUSTOMER.value,
            created_at=now,
            updated_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=str(user.id),
                email=email,
                role=user.role,
                registered_at=now,
            )
        )
        return user

    def refresh_profile(self, email=None, first_name=None, last_name=None, profile_image_url=None):
        """Overwrite profile fields with the identity provider's latest claims."""
        if email:
            self.email = EmailAddress(address=email)
        self.first_name = first_name
        self.last_name = last_name
        self.profile_image_url = profile_image_url
        self.updated_at = datetime.now(UTC)

    def change_role(self, role):
        if role == self.role:
            return
        previous = self.role
        self.role = role
        self.updated_at = datetime.now(UTC)
        self.raise_(
            UserRoleChanged(
                user_id=str(self.id),
                previous_role=previous,
                new_role=self.role,
            )
        )

    @property
    def display_name(self) -> str:
        name = " ".join(part for part in (self.first_name, self.last_name) if part)
        return name or "Anonymous"

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value
