from .serializers import (
    ProductSerializer,
    ProductDetailSerializer,
    AttributeTypeSerializer,
    AttributeOptionSerializer,
    VariantSerializer,
)

__all__ = [
    'ProductSerializer',
    'ProductDetailSerializer',
    'AttributeTypeSerializer',
    'AttributeOptionSerializer',
    'VariantSerializer',
]
