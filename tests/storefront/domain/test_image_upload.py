import pytest
from protean.exceptions import ValidationError
from storefront.product.images import NOT_AN_IMAGE, check_image_upload


@pytest.mark.parametrize("content_type", ["image/png", "image/jpg", "image/jpeg", "IMAGE/PNG"])
def test_accepted_image_types_pass(content_type):
    check_image_upload(content_type, 10)


@pytest.mark.parametrize(
    "content_type,size",
    [
        ("image/gif", 10),
        ("text/plain", 10),
        (None, 10),
        ("image/png", 0),
    ],
)
def test_other_uploads_are_rejected_on_the_image_field(content_type, size):
    with pytest.raises(ValidationError) as exc:
        check_image_upload(content_type, size)

    assert exc.value.messages == {"image": [NOT_AN_IMAGE]}
