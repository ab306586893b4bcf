"""Domain events for the Review aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Review")
class ReviewSubmitted:
    __version__ = 1

    review_id: Identifier(required=True)
    product_id: Identifier(required=True)
    user_id: Identifier(required=True)
    rating: Integer(required=True)
    title: String()
    submitted_at: DateTime(required=True)
