"""Review listing with reviewer display names."""

from dataclasses import dataclass
from datetime import datetime

from protean.utils.globals import current_domain

from storefront.catalogue.product.queries import get_product
from storefront.identity.user.user import User
from storefront.reviews.review.review import Review


@dataclass(frozen=True)
class ReviewView:
    review_id: str
    product_id: str
    user_id: str
    reviewer_name: str
    rating: int
    title: str | None
    comment: str | None
    created_at: datetime | None


def list_product_reviews(product_id) -> list[ReviewView]:
    """Reviews for an active product, newest first."""
    get_product(product_id)

    users = current_domain.repository_for(User)
    reviews = sorted(
        current_domain.repository_for(Review).for_product(product_id),
        key=lambda r: r.created_at,
        reverse=True,
    )

    views = []
    for review in reviews:
        user = users.find(review.user_id)
        views.append(
            ReviewView(
                review_id=str(review.id),
                product_id=str(review.product_id),
                user_id=str(review.user_id),
                reviewer_name=user.display_name if user else "Anonymous",
                rating=review.rating,
                title=review.title,
                comment=review.comment,
                created_at=review.created_at,
            )
        )
    return views
