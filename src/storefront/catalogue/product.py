"""Product value object: the priced thing a line item refers to."""

from protean.fields import Float, String

from storefront.domain import storefront


@storefront.value_object
class Product:
    """An immutable name and unit price.

    Products carry no identity of their own: two products with the same name
    and price are equal. Many line items may refer to equal products.
    """

    name = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)

    def __str__(self):
        return f"{self.name} (${self.price})"
