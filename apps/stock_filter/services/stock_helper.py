"""
Stock availability resolver for variation selection.

Stock rules:
- stock value > 0 = in stock.
- value <= 0, None, unreadable, or no stock field at all = out of stock.

Everything here works on plain VariationSnapshot records and is recomputed
per request; nothing is cached between calls.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

logger = logging.getLogger(__name__)


class StockHelper:
    """
    Stock checks shared by the form alteration, the default variation
    selection and the AJAX refresh, so all of them agree on what
    "in stock" means.
    """

    @staticmethod
    def is_in_stock(variation) -> bool:
        """
        Check if a single variation is in stock.

        Missing field or missing value resolves to out of stock, never the
        other way around.
        """
        if not getattr(variation, 'has_stock_field', True):
            return False

        value = variation.stock_value
        if value is None or value == '':
            return False

        try:
            quantity = int(value)
        except (TypeError, ValueError, OverflowError):
            logger.debug(
                "Unreadable stock value %r on variation %s", value, variation.id
            )
            return False

        return quantity > 0

    @staticmethod
    def build_stock_map(variations: Iterable) -> Dict[Any, bool]:
        """Return {variation_id: is_in_stock} for every variation."""
        return {
            variation.id: StockHelper.is_in_stock(variation)
            for variation in variations
        }

    @staticmethod
    def get_first_in_stock_variation(variations: Iterable) -> Optional[Any]:
        """
        Find the first in-stock variation, in the given order.

        Returns None when nothing is in stock; the caller then applies its
        own default policy.
        """
        for variation in variations:
            if StockHelper.is_in_stock(variation):
                return variation
        return None

    @staticmethod
    def has_any_in_stock(variations: Iterable) -> bool:
        return any(StockHelper.is_in_stock(variation) for variation in variations)

    @staticmethod
    def get_in_stock_variation_ids(variations: Iterable) -> List[Any]:
        return [
            variation.id for variation in variations
            if StockHelper.is_in_stock(variation)
        ]

    @staticmethod
    def filter_in_stock_variations(variations: Iterable) -> List[Any]:
        return [
            variation for variation in variations
            if StockHelper.is_in_stock(variation)
        ]

    @staticmethod
    def build_attribute_variation_map(variations: Iterable) -> Dict[str, Dict[Any, List[Any]]]:
        """
        Build a map of attribute values to the variations carrying them.

        Args:
            variations: Iterable of variation snapshots

        Returns:
            Nested dict: dimension => attribute_value_id => [variation_ids],
            in the order the variations were given
        """
        attribute_map = {}

        for variation in variations:
            for dimension, value_id in variation.attribute_values.items():
                # Empty reference field
                if value_id is None:
                    continue

                values = attribute_map.setdefault(dimension, {})
                values.setdefault(value_id, []).append(variation.id)

        return attribute_map

    @staticmethod
    def seed_attribute_values(
        attribute_map: Mapping[str, Mapping[Any, List[Any]]],
        known_values: Mapping[str, Iterable[Any]]
    ) -> Dict[str, Dict[Any, List[Any]]]:
        """
        Return a copy of attribute_map where every known value is present.

        Values no variation carries get an empty list, which makes them
        disabled: there is no in-stock variation behind them.
        """
        seeded = {
            dimension: {value_id: list(ids) for value_id, ids in values.items()}
            for dimension, values in attribute_map.items()
        }

        for dimension, value_ids in known_values.items():
            values = seeded.setdefault(dimension, {})
            for value_id in value_ids:
                values.setdefault(value_id, [])

        return seeded

    @staticmethod
    def get_disabled_attribute_values(
        attribute_map: Mapping[str, Mapping[Any, List[Any]]],
        stock_map: Mapping[Any, bool],
        dimension: str
    ) -> List[Any]:
        """
        Determine which values of one dimension must be disabled.

        A value is disabled if ALL variations carrying it are out of stock.
        A single in-stock variation keeps it enabled. Variation ids missing
        from stock_map count as out of stock.

        Returns:
            List of attribute value ids, in attribute_map order
        """
        disabled_values = []

        for value_id, variation_ids in attribute_map.get(dimension, {}).items():
            if not any(stock_map.get(variation_id) for variation_id in variation_ids):
                disabled_values.append(value_id)

        return disabled_values

    @staticmethod
    def get_disabled_attributes(
        attribute_map: Mapping[str, Mapping[Any, List[Any]]],
        stock_map: Mapping[Any, bool]
    ) -> Dict[str, List[Any]]:
        """Disabled values for every dimension, leaving out dimensions with none."""
        disabled_attributes = {}

        for dimension in attribute_map:
            disabled_values = StockHelper.get_disabled_attribute_values(
                attribute_map, stock_map, dimension
            )
            if disabled_values:
                disabled_attributes[dimension] = disabled_values

        return disabled_attributes

    @staticmethod
    def build_refresh_payload(
        variations: Iterable,
        selected=None,
        known_values: Optional[Mapping[str, Iterable[Any]]] = None
    ) -> Dict[str, Any]:
        """
        Build the structure the client behaviour consumes after a
        variation change.

        known_values, when given, seeds attribute values carried by no
        variation so they are reported as disabled too.

        Returns dict with:
        - stockMap: variation id => bool
        - disabledAttributes: dimension => [disabled value ids]
        - selectedVariationId: id of the selected variation or None
        - selectedVariationInStock: bool
        """
        variations = list(variations)
        stock_map = StockHelper.build_stock_map(variations)
        attribute_map = StockHelper.build_attribute_variation_map(variations)
        if known_values:
            attribute_map = StockHelper.seed_attribute_values(attribute_map, known_values)

        return {
            'stockMap': stock_map,
            'disabledAttributes': StockHelper.get_disabled_attributes(
                attribute_map, stock_map
            ),
            'selectedVariationId': selected.id if selected is not None else None,
            'selectedVariationInStock': (
                StockHelper.is_in_stock(selected) if selected is not None else False
            ),
        }
