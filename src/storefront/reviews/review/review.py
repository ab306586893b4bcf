"""Review aggregate — a shopper's rating of a product they care about."""

from datetime import UTC, datetime

from protean import Index
from protean.fields import DateTime, Identifier, Integer, String, Text

from storefront.domain import storefront
from storefront.reviews.review.events import ReviewSubmitted


# One review per shopper per product.
@storefront.aggregate(indexes=[Index("user_id", "product_id", unique=True)])
class Review:
    product_id: Identifier(required=True)
    user_id: Identifier(required=True)
    rating: Integer(required=True, min_value=1, max_value=5)
    title: String(max_length=200)
    comment: Text()
    created_at: DateTime()

    @classmethod
    def submit(cls, product_id, user_id, rating, title=None, comment=None):
        now = datetime.now(UTC)
        review = cls(
            product_id=str(product_id),
            user_id=str(user_id),
            rating=rating,
            title=title,
            comment=comment,
            created_at=now,
        )
        review.raise_(
            ReviewSubmitted(
                review_id=str(review.id),
                product_id=str(product_id),
                user_id=str(user_id),
                rating=rating,
                title=title,
                submitted_at=now,
            )
        )
        return review
