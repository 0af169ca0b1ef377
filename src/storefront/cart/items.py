"""Cart line management: commands and handler.

Carts are embedded in the User aggregate, so every command here loads the
user, changes the cart and saves the user back.
"""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.product.product import Product
from storefront.user.user import User


@storefront.command(part_of="User")
class AddToCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)


@storefront.command(part_of="User")
class RemoveFromCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)


@storefront.command_handler(part_of=User)
class ManageCartHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        # Unknown products fail with ObjectNotFoundError before the cart is touched
        product = current_domain.repository_for(Product).get(command.product_id)

        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        user.add_to_cart(product.id)
        repo.add(user)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        if user.remove_from_cart(command.product_id):
            repo.add(user)