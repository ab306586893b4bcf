"""User upsert — called whenever the identity provider vouches for a login."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.user.user import User


@storefront.command(part_of="User")
class UpsertUser:
    user_id: Identifier(required=True)
    email: String(max_length=254)
    first_name: String(max_length=100)
    last_name: String(max_length=100)
    profile_image_url: String(max_length=500)
    role: String(max_length=20)


@storefront.command_handler(part_of=User)
class UpsertUserHandler:
    @handle(UpsertUser)
    def upsert_user(self, command):
        repo = current_domain.repository_for(User)
        try:
            user = repo.get(command.user_id)
        except ObjectNotFoundError:
            user = User.register(
                user_id=command.user_id,
                email=command.email,
                first_name=command.first_name,
                last_name=command.last_name,
                profile_image_url=command.profile_image_url,
                role=command.role,
            )
        else:
            user.refresh_profile(
                email=command.email,
                first_name=command.first_name,
                last_name=command.last_name,
                profile_image_url=command.profile_image_url,
            )
            if command.role:
                user.change_role(command.role)

        repo.add(user)
        return str(user.id)
