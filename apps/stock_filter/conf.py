"""
Settings for the stock filter, read from settings.STOCK_FILTER.

Example:
    STOCK_FILTER = {
        'STOCK_FIELD': 'stock_quantity',
        'ATTRIBUTE_DIMENSIONS': ['color', 'size'],
    }
"""

from django.conf import settings

DEFAULTS = {
    # Variant attribute holding the stock quantity
    'STOCK_FIELD': 'stock_quantity',
    # None means every attribute type of the product is a dimension
    'ATTRIBUTE_DIMENSIONS': None,
    'OUT_OF_STOCK_LABEL': '(Esgotado)',
    'OUT_OF_STOCK_MESSAGE': 'Produto esgotado',
}


def get_setting(name):
    user_settings = getattr(settings, 'STOCK_FILTER', None) or {}
    if name in user_settings:
        return user_settings[name]
    return DEFAULTS[name]


def attribute_dimension_predicate():
    """Return a callable telling whether a dimension slug is an attribute dimension."""
    dimensions = get_setting('ATTRIBUTE_DIMENSIONS')
    if dimensions is None:
        return lambda dimension: True

    allowed = frozenset(dimensions)
    return lambda dimension: dimension in allowed
