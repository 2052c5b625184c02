"""Errors raised by the ledger services.

The API layer maps each family to an HTTP status in ``brostok.main``.
"""


class LedgerError(Exception):
    pass


class ValidationError(LedgerError, ValueError):
    """Missing or malformed input."""


class InvalidQuantity(ValidationError):
    def __init__(self, quantity):
        self.quantity = quantity
        super().__init__("Jumlah harus berupa bilangan bulat positif")


class InsufficientStock(LedgerError):
    def __init__(self, variant_id: int, available: int, requested: int):
        self.variant_id = variant_id
        self.available = available
        self.requested = requested
        super().__init__(f"Stok tidak cukup (tersedia: {available}, diminta: {requested})")


class NotFound(LedgerError, LookupError):
    pass


class ProductNotFound(NotFound):
    def __init__(self, product_id):
        self.product_id = product_id
        super().__init__("Produk tidak ditemukan")


class VariantNotFound(NotFound):
    def __init__(self, variant_id):
        self.variant_id = variant_id
        super().__init__("Varian tidak ditemukan")


class AuthenticationError(LedgerError):
    pass
