"""
Extension points of the catalog storefront.

Other apps connect receivers to these signals to change how variation
selection behaves without touching the catalog views or forms. Receivers
get a mutable event object and change it in place.
"""

from django.dispatch import Signal

# Sent by VariationAttributesForm once its fields are built.
# kwargs: form, product, variants
variation_form_built = Signal()

# Sent when the form picks the variant selected by default.
# kwargs: event (ProductDefaultVariationEvent)
product_default_variation = Signal()

# Sent by the AJAX endpoint after the shopper changed an attribute.
# kwargs: event (ProductVariationAjaxChangeEvent)
product_variation_ajax_change = Signal()


class ProductDefaultVariationEvent:
    """Carries the default variant of a product; receivers may replace it."""

    def __init__(self, product, default_variation, variations):
        self.product = product
        self.default_variation = default_variation
        self.variations = variations

    def get_default_variation(self):
        return self.default_variation

    def set_default_variation(self, variation):
        self.default_variation = variation


class AjaxResponse:
    """
    Commands sent back to the browser after an AJAX variation change.

    Each command is a dict with a "command" name and its arguments; the
    storefront script runs them in order.
    """

    def __init__(self):
        self.commands = []

    def add_command(self, command):
        self.commands.append(command)

    def invoke(self, method, *args):
        self.add_command({
            'command': 'invoke',
            'method': method,
            'args': list(args),
        })


class ProductVariationAjaxChangeEvent:
    """The variant the shopper switched to, with the response being built."""

    def __init__(self, product, variation, variations, response=None):
        self.product = product
        self.variation = variation
        self.variations = variations
        self.response = response if response is not None else AjaxResponse()
