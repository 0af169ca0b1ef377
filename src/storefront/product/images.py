"""Checks on uploaded product images."""

from protean.exceptions import ValidationError

from storefront.config import ACCEPTED_IMAGE_TYPES

NOT_AN_IMAGE = "Attached file is not an image!"


def check_image_upload(content_type, size, accepted_types=ACCEPTED_IMAGE_TYPES):
    """Reject missing, empty or non-image attachments."""
    if not content_type or size <= 0 or content_type.lower() not in accepted_types:
        raise ValidationError({"image": [NOT_AN_IMAGE]})
