"""FastAPI endpoints for the Identity context."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from storefront.identity.api.schemas import UpsertUserRequest, UserResponse
from storefront.identity.user.registration import UpsertUser
from storefront.identity.user.user import User

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserResponse)
async def upsert_user(body: UpsertUserRequest) -> UserResponse:
    """Create or refresh the local copy of an identity-provider user."""
    command = UpsertUser(
        user_id=body.user_id,
        email=body.email,
        first_name=body.first_name,
        last_name=body.last_name,
        profile_image_url=body.profile_image_url,
        role=body.role,
    )
    user_id = current_domain.process(command, asynchronous=False)
    user = current_domain.repository_for(User).get(user_id)
    return UserResponse(
        id=str(user.id),
        email=user.email.address if user.email else None,
        first_name=user.first_name,
        last_name=user.last_name,
        profile_image_url=user.profile_image_url,
        role=user.role,
    )
