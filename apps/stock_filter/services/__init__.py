from .snapshot import VariationSnapshot, known_attribute_values, snapshot_variations
from .stock_helper import StockHelper

__all__ = [
    'StockHelper',
    'VariationSnapshot',
    'known_attribute_values',
    'snapshot_variations',
]
