"""Caller identity and the single authorization predicate set.

Every core operation receives the caller's identity explicitly; nothing reads
ambient session state. Admin-only operations call ``require_admin`` before
mutating or aggregating, and per-user reads call ``require_owner_or_admin``.
"""

from protean.fields import Identifier, String

from storefront.domain import storefront
from storefront.identity.user.user import UserRole
from storefront.shared.errors import Unauthorized


@storefront.value_object
class Identity:
    """The authenticated caller, as vouched for by the identity provider."""

    user_id: Identifier(required=True)
    role: String(choices=UserRole, default=UserRole.CUSTOMER.value)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value


def identity_of(user_id, role=None) -> Identity:
    return Identity(user_id=str(user_id), role=role or UserRole.CUSTOMER.value)


def require_admin(identity: Identity) -> None:
    if identity is None or not identity.is_admin:
        raise Unauthorized({"role": ["Admin access required"]})


def require_owner_or_admin(identity: Identity, owner_id) -> None:
    if identity is None:
        raise Unauthorized({"identity": ["Authentication required"]})
    if identity.is_admin:
        return
    if str(identity.user_id) != str(owner_id):
        raise Unauthorized({"user_id": ["You do not have access to this resource"]})
