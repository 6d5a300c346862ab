"""
Receivers hooking the stock filter into the catalog storefront.

- variation_form_built: hide the form when nothing is in stock, otherwise
  hand disabled option values to the attribute widgets.
- product_default_variation: preselect the first in-stock variant.
- product_variation_ajax_change: send fresh stock data to the browser.
"""

import json
import logging

from django.dispatch import receiver

from apps.catalog.events import (
    product_default_variation,
    product_variation_ajax_change,
    variation_form_built,
)
from . import conf
from .api.serializers import StockFilterPayloadSerializer
from .services import (
    StockHelper,
    known_attribute_values,
    snapshot_variations,
)

logger = logging.getLogger(__name__)

REFRESH_METHOD = 'stockVariationFilterRefresh'


@receiver(variation_form_built)
def filter_out_of_stock_options(sender, form, product, variants, **kwargs):
    variations = snapshot_variations(variants)
    if not variations:
        return

    if not StockHelper.has_any_in_stock(variations):
        logger.info("All variants of %s are out of stock, hiding form", product.slug)
        form.hide_form = True
        form.all_out_of_stock = True
        form.unavailable_message = conf.get_setting('OUT_OF_STOCK_MESSAGE')
        return

    is_attribute_dimension = conf.attribute_dimension_predicate()
    offered = {
        dimension: values
        for dimension, values in form.get_attribute_choices().items()
        if is_attribute_dimension(dimension)
    }

    stock_map = StockHelper.build_stock_map(variations)
    attribute_map = StockHelper.seed_attribute_values(
        StockHelper.build_attribute_variation_map(variations), offered
    )
    label = conf.get_setting('OUT_OF_STOCK_LABEL')

    for field_name in offered:
        disabled_values = StockHelper.get_disabled_attribute_values(
            attribute_map, stock_map, field_name
        )
        if not disabled_values:
            continue

        form.unavailable_choices[field_name] = disabled_values
        widget = form.fields[field_name].widget
        if hasattr(widget, 'set_disabled_values'):
            widget.set_disabled_values(disabled_values, label)
        else:
            # Plain widget: leave it to the script
            logger.debug(
                "Widget %s of %s is not stock aware",
                type(widget).__name__, field_name
            )
            widget.attrs['data-stock-disabled'] = json.dumps(disabled_values)


@receiver(product_default_variation)
def select_first_in_stock_variation(sender, event, **kwargs):
    default_variation = event.get_default_variation()
    if default_variation is None:
        return

    if StockHelper.is_in_stock(snapshot_variations([default_variation])[0]):
        return

    variations = snapshot_variations(event.variations)
    first_in_stock = StockHelper.get_first_in_stock_variation(variations)
    if first_in_stock is None:
        return

    by_id = {variation.pk: variation for variation in event.variations}
    logger.debug(
        "Default variant %s is out of stock, using %s",
        default_variation.pk, first_in_stock.id
    )
    event.set_default_variation(by_id[first_in_stock.id])


@receiver(product_variation_ajax_change)
def add_stock_refresh_command(sender, event, **kwargs):
    variations = snapshot_variations(event.variations)
    selected = snapshot_variations([event.variation])[0]

    payload = StockHelper.build_refresh_payload(
        variations,
        selected=selected,
        known_values=known_attribute_values(event.product),
    )
    event.response.invoke(REFRESH_METHOD, StockFilterPayloadSerializer(payload).data)
