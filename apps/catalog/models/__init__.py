"""
Catalog models for products sold in several variants.

Model Hierarchy:
- Product: Base product (e.g., "Camiseta Básica")
- AttributeType: Dimensions variants differ on (Color, Size)
- AttributeOption: Values for each attribute type (Azul, M)
- Variant: Individual SKU with price and stock
"""

from .product import Product
from .attribute import AttributeType, AttributeOption
from .variant import Variant, VariantAttribute

__all__ = [
    'Product',
    'AttributeType',
    'AttributeOption',
    'Variant',
    'VariantAttribute',
]
