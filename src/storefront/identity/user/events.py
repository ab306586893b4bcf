"""Domain events for the User aggregate."""

from protean.fields import DateTime, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="User")
class UserRegistered:
    """A user signed in for the first time."""

    __version__ = 1

    user_id: Identifier(required=True)
    email: String()
    role: String(required=True)
    registered_at: DateTime(required=True)


@storefront.event(part_of="User")
class UserRoleChanged:
    """A user was promoted to, or demoted from, the admin role."""

    __version__ = 1

    user_id: Identifier(required=True)
    previous_role: String(required=True)
    new_role: String(required=True)
