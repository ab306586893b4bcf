"""SubmitReview — one review per user per product.

The product's rating and review count are recomputed in the same Unit of Work
as the new review.
"""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.catalogue.product.queries import get_product
from storefront.domain import storefront
from storefront.reviews.review.review import Review

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Review")
class SubmitReview:
    user_id: Identifier(required=True)
    product_id: Identifier(required=True)
    rating: Integer(required=True)
    title: String(max_length=200)
    comment: Text()


@storefront.command_handler(part_of=Review)
class SubmitReviewHandler:
    @handle(SubmitReview)
    def submit_review(self, command):
        product = get_product(command.product_id)

        repo = current_domain.repository_for(Review)
        if repo.by_user_for_product(command.user_id, command.product_id) is not None:
            raise ValidationError({"review": ["You have already reviewed this product"]})

        review = Review.submit(
            product_id=command.product_id,
            user_id=command.user_id,
            rating=command.rating,
            title=command.title,
            comment=command.comment,
        )

        ratings = [r.rating for r in repo.for_product(command.product_id)] + [review.rating]
        repo.add(review)

        product.record_rating(sum(ratings) / len(ratings), len(ratings))
        current_domain.repository_for(Product).add(product)

        logger.info(
            "Review submitted",
            review_id=str(review.id),
            product_id=str(command.product_id),
            rating=review.rating,
            product_rating=product.rating,
        )
        return str(review.id)
