"""FastAPI endpoints for the caller's wishlist."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from storefront.catalogue.api.schemas import ProductResponse
from storefront.identity.api.dependencies import current_identity
from storefront.identity.authorization import Identity
from storefront.wishlist.api.schemas import AddToWishlistRequest, WishlistEntryResponse, WishlistResponse
from storefront.wishlist.management import AddToWishlist, RemoveFromWishlist
from storefront.wishlist.queries import list_wishlist

router = APIRouter(prefix="/wishlist", tags=["wishlist"])


def _wishlist(user_id) -> WishlistResponse:
    return WishlistResponse(
        items=[
            WishlistEntryResponse(
                id=str(entry.id),
                product=ProductResponse.from_product(product),
                created_at=entry.created_at,
            )
            for entry, product in list_wishlist(user_id)
        ]
    )


@router.get("", response_model=WishlistResponse)
async def view_wishlist(identity: Identity = Depends(current_identity)) -> WishlistResponse:
    return _wishlist(identity.user_id)


@router.post("", status_code=201, response_model=WishlistResponse)
async def add_to_wishlist(body: AddToWishlistRequest, identity: Identity = Depends(current_identity)) -> WishlistResponse:
    current_domain.process(AddToWishlist(user_id=identity.user_id, product_id=body.product_id), asynchronous=False)
    return _wishlist(identity.user_id)


@router.delete("/{product_id}", response_model=WishlistResponse)
async def remove_from_wishlist(product_id: str, identity: Identity = Depends(current_identity)) -> WishlistResponse:
    current_domain.process(RemoveFromWishlist(user_id=identity.user_id, product_id=product_id), asynchronous=False)
    return _wishlist(identity.user_id)
