"""EmailAddress value object."""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import String

from storefront.domain import storefront


@storefront.value_object
class EmailAddress:
    """An email address with one ``@``, a non-empty local part and a dotted domain."""

    address: String(required=True, max_length=254)

    @invariant.post
    def must_be_well_formed(self):
        email = self.address
        if any(ch.isspace() for ch in email) or email.count("@") != 1:
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

        local_part, domain_part = email.split("@", 1)
        if not local_part or local_part.startswith(".") or local_part.endswith("."):
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})
        if "." not in domain_part or domain_part.startswith(".") or domain_part.endswith("."):
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})
        if ".." in email:
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})
