from .serializers import StockFilterPayloadSerializer

__all__ = [
    'StockFilterPayloadSerializer',
]
