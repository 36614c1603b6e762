"""
Errors raised by the sale engine.

Each error knows the HTTP status it maps to and the JSON body views return
for it.
"""


class SaleError(Exception):
    """Base class for sale engine errors."""

    status_code = 400
    default_message = "Invalid sale request"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self):
        return {"message": self.message}


class SaleValidationError(SaleError):
    """The proposed sale or one of its items is malformed."""


class InvalidCustomerError(SaleValidationError):
    default_message = "Invalid customer ID"


class EmptySaleError(SaleValidationError):
    default_message = "Sale items were not provided or are invalid"


class InvalidSaleItemError(SaleValidationError):
    default_message = "Invalid sale item data"


class InvalidSaleError(SaleValidationError):
    default_message = "Invalid sale data"


class InsufficientStockError(SaleError):
    """A product does not have enough stock to cover the requested quantity."""

    def __init__(self, product_id, product_name, available, requested):
        self.product_id = product_id
        self.product_name = product_name
        self.available = available
        self.requested = requested
        super().__init__(
            f"Insufficient stock for {product_name}. "
            f"Available: {available}, Requested: {requested}"
        )

    def to_dict(self):
        return {
            "message": self.message,
            "product": self.product_name,
            "productId": self.product_id,
            "available": self.available,
            "requested": self.requested,
        }


class SaleNotFoundError(SaleError):
    status_code = 404
    default_message = "Sale not found"
