import pytest
from protean import current_domain
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def storefront_bed():
    from storefront.domain import storefront

    bed = DomainFixture(storefront)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(storefront_bed):
    with storefront_bed.domain_context():
        yield

        for _, provider in current_domain.providers.items():
            provider._data_reset()
        current_domain.event_store.store._data_reset()


@pytest.fixture(autouse=True)
def asset_store(tmp_path):
    from storefront.assets import reset_asset_store, set_asset_store
    from storefront.assets.local_store import LocalAssetStore

    store = LocalAssetStore(root=tmp_path / "images")
    set_asset_store(store)
    yield store
    reset_asset_store()


@pytest.fixture(autouse=True)
def mailer():
    from storefront.notification import get_mailer, reset_mailer

    reset_mailer()
    yield get_mailer()
    reset_mailer()


@pytest.fixture()
def make_user():
    """Register a user straight through the repository and return it."""
    from storefront.user.user import User

    def _make_user(email="shopper@example.com", password_hash="not-a-real-hash"):
        user = User.register(email=email, password_hash=password_hash)
        current_domain.repository_for(User).add(user)
        return current_domain.repository_for(User).get(user.id)

    return _make_user


@pytest.fixture()
def make_product():
    """List a product for an owner and return it."""
    from storefront.product.product import Product

    def _make_product(owner_id, title="Blue Mug", price=12.5, description="A sturdy blue mug", image_url="/images/mug.png"):
        product = Product.list_for_sale(
            owner_id=owner_id,
            title=title,
            price=price,
            description=description,
            image_url=image_url,
        )
        current_domain.repository_for(Product).add(product)
        return current_domain.repository_for(Product).get(product.id)

    return _make_product
