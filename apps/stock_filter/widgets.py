"""
Choice widgets able to render some of their options as unavailable.

They compute nothing themselves: the variation_form_built receiver hands
them the disabled option values.
"""

import json

from django import forms

PROCESSED_CLASS = 'stock-variation-filter--processed'
DISABLED_ITEM_CLASS = 'form-item-disabled'


class StockAwareWidgetMixin:
    """Shared state for the stock-aware widgets."""

    class Media:
        js = ('stock_filter/js/stock_filter.js',)
        css = {'all': ('stock_filter/css/stock_filter.css',)}

    disabled_values = frozenset()
    out_of_stock_label = ''

    def set_disabled_values(self, values, label=''):
        values = list(values)
        self.disabled_values = frozenset(str(value) for value in values)
        self.out_of_stock_label = label

        self.attrs['data-stock-disabled'] = json.dumps(values)
        classes = self.attrs.get('class', '').split()
        if PROCESSED_CLASS not in classes:
            classes.append(PROCESSED_CLASS)
        self.attrs['class'] = ' '.join(classes)

    def is_disabled_value(self, value):
        return str(value) in self.disabled_values

    def format_value(self, value):
        # A disabled selection falls back to the first enabled option
        values = super().format_value(value)
        if values and all(self.is_disabled_value(v) for v in values):
            fallback = next(
                (str(choice) for choice, _ in self.choices
                 if choice != '' and not self.is_disabled_value(choice)),
                None
            )
            if fallback is not None:
                return [fallback]
        return values


class StockAwareSelect(StockAwareWidgetMixin, forms.Select):
    """Select whose out-of-stock options are disabled and labelled."""

    def create_option(self, name, value, label, selected, index, subindex=None, attrs=None):
        option = super().create_option(
            name, value, label, selected, index, subindex=subindex, attrs=attrs
        )
        if self.is_disabled_value(value):
            option['attrs']['disabled'] = True
            if self.out_of_stock_label:
                option['label'] = f"{option['label']} {self.out_of_stock_label}"
        return option


class StockAwareRadioSelect(StockAwareWidgetMixin, forms.RadioSelect):
    """Radio buttons whose out-of-stock inputs are disabled."""

    option_template_name = 'stock_filter/widgets/radio_option.html'

    def create_option(self, name, value, label, selected, index, subindex=None, attrs=None):
        option = super().create_option(
            name, value, label, selected, index, subindex=subindex, attrs=attrs
        )
        option['wrapper_classes'] = []
        if self.is_disabled_value(value):
            option['attrs']['disabled'] = True
            option['wrapper_classes'].append(DISABLED_ITEM_CLASS)
        return option


class StockAwareRenderedSelect(StockAwareRadioSelect):
    """
    Rendered attribute swatches. Out-of-stock swatches stay clickable
    markup-wise and are only flagged on the wrapper, the script takes
    care of the rest.
    """

    def create_option(self, name, value, label, selected, index, subindex=None, attrs=None):
        option = super().create_option(
            name, value, label, selected, index, subindex=subindex, attrs=attrs
        )
        option['attrs'].pop('disabled', None)
        return option
