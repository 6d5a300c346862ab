"""
Plain-data view of catalog variants.

The stock helper never touches ORM objects: adapters snapshot the variants
of one request into VariationSnapshot records and hand those over.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional

from apps.stock_filter import conf


@dataclass(frozen=True)
class VariationSnapshot:
    """
    One purchasable configuration of a product, reduced to what the stock
    helper needs.

    has_stock_field is False when the variant type has no stock field at all,
    which is different from a stock field holding None.
    """
    id: Any
    stock_value: Optional[Any] = None
    has_stock_field: bool = True
    attribute_values: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_variant(
        cls,
        variant,
        stock_field: str,
        is_attribute_dimension: Callable[[str], bool]
    ) -> 'VariationSnapshot':
        has_stock_field = hasattr(variant, stock_field)
        stock_value = getattr(variant, stock_field, None)

        attribute_values = {
            dimension: value_id
            for dimension, value_id in variant.get_option_ids().items()
            if is_attribute_dimension(dimension)
        }

        return cls(
            id=variant.pk,
            stock_value=stock_value,
            has_stock_field=has_stock_field,
            attribute_values=attribute_values,
        )


def snapshot_variations(
    variants: Iterable,
    stock_field: Optional[str] = None,
    is_attribute_dimension: Optional[Callable[[str], bool]] = None
) -> List[VariationSnapshot]:
    """
    Snapshot catalog variants, keeping their order.

    Args:
        variants: Iterable of host variants (anything with pk and get_option_ids())
        stock_field: Attribute holding the stock quantity, STOCK_FIELD by default
        is_attribute_dimension: Predicate selecting attribute dimensions,
            built from ATTRIBUTE_DIMENSIONS by default

    Returns:
        List of VariationSnapshot in the same order as variants
    """
    if stock_field is None:
        stock_field = conf.get_setting('STOCK_FIELD')
    if is_attribute_dimension is None:
        is_attribute_dimension = conf.attribute_dimension_predicate()

    return [
        VariationSnapshot.from_variant(variant, stock_field, is_attribute_dimension)
        for variant in variants
    ]


def known_attribute_values(
    product,
    is_attribute_dimension: Optional[Callable[[str], bool]] = None
) -> Dict[str, List[Any]]:
    """
    Every attribute value defined on the product, whether or not an enabled
    variant carries it.

    Returns:
        Dict of {dimension: [attribute_value_id, ...]}
    """
    if is_attribute_dimension is None:
        is_attribute_dimension = conf.attribute_dimension_predicate()

    values = {}
    options = product.attribute_options.select_related('attribute_type').order_by(
        'attribute_type__display_order', 'display_order', 'value'
    )
    for option in options:
        dimension = option.attribute_type.slug
        if is_attribute_dimension(dimension):
            values.setdefault(dimension, []).append(option.pk)

    return values
