"""FastAPI endpoints for product reviews."""

from dataclasses import asdict

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from storefront.identity.api.dependencies import current_identity
from storefront.identity.authorization import Identity
from storefront.reviews.api.schemas import (
    ReviewIdResponse,
    ReviewListResponse,
    ReviewResponse,
    SubmitReviewRequest,
)
from storefront.reviews.review.queries import list_product_reviews
from storefront.reviews.review.submission import SubmitReview

router = APIRouter(prefix="/products", tags=["reviews"])


@router.get("/{product_id}/reviews", response_model=ReviewListResponse)
async def product_reviews(product_id: str) -> ReviewListResponse:
    return ReviewListResponse(reviews=[ReviewResponse(**asdict(v)) for v in list_product_reviews(product_id)])


@router.post("/{product_id}/reviews", status_code=201, response_model=ReviewIdResponse)
async def submit_review(
    product_id: str, body: SubmitReviewRequest, identity: Identity = Depends(current_identity)
) -> ReviewIdResponse:
    command = SubmitReview(
        user_id=identity.user_id,
        product_id=product_id,
        rating=body.rating,
        title=body.title,
        comment=body.comment,
    )
    review_id = current_domain.process(command, asynchronous=False)
    return ReviewIdResponse(review_id=review_id)
