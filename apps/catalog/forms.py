"""
Add-to-cart form with one choice field per attribute type of a product.
"""

from django import forms
from django.conf import settings
from django.utils.module_loading import import_string

from .events import (
    ProductDefaultVariationEvent,
    product_default_variation,
    variation_form_built,
)
from .models import AttributeOption, AttributeType
from .services import VariantNavigationService

DEFAULT_VARIATION_WIDGETS = {
    AttributeType.ELEMENT_SELECT: 'django.forms.Select',
    AttributeType.ELEMENT_RADIOS: 'django.forms.RadioSelect',
    AttributeType.ELEMENT_RENDERED: 'django.forms.RadioSelect',
}


def get_widget_class(element_type):
    """Widget class for an element type, overridable with CATALOG_VARIATION_WIDGETS."""
    widgets = dict(DEFAULT_VARIATION_WIDGETS)
    widgets.update(getattr(settings, 'CATALOG_VARIATION_WIDGETS', {}))
    path = widgets.get(element_type, widgets[AttributeType.ELEMENT_SELECT])
    return import_string(path)


class VariationAttributesForm(forms.Form):
    """
    Lets the shopper pick a variant through its attribute options.

    Apps hook in through catalog.events: variation_form_built may flag the
    form as hidden (hide_form) or alter its fields, product_default_variation
    may change which variant is preselected.
    """
    quantity = forms.IntegerField(min_value=1, initial=1, label='Quantidade')

    def __init__(self, *args, product, variants=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.product = product
        self.variants = variants if variants is not None else product.get_enabled_variants()
        self.hide_form = False
        self.all_out_of_stock = False
        self.unavailable_message = ''
        # {field_name: [option ids]} receivers mark as not purchasable
        self.unavailable_choices = {}

        self.default_variation = self.get_default_variation()
        self._build_attribute_fields()

        variation_form_built.send(
            sender=self.__class__,
            form=self,
            product=product,
            variants=self.variants,
        )

    def get_default_variation(self):
        """First enabled variant, unless a receiver picks another one."""
        if not self.variants:
            return None

        event = ProductDefaultVariationEvent(
            product=self.product,
            default_variation=self.variants[0],
            variations=self.variants,
        )
        product_default_variation.send(sender=self.product.__class__, event=event)
        return event.get_default_variation()

    def _build_attribute_fields(self):
        options = AttributeOption.objects.filter(
            product=self.product
        ).select_related('attribute_type').order_by(
            'attribute_type__display_order', 'attribute_type__name',
            'display_order', 'value'
        )

        grouped = {}
        for option in options:
            attr_type, choices = grouped.setdefault(
                option.attribute_type.slug, (option.attribute_type, [])
            )
            choices.append((option.pk, option.get_display_value()))

        default_ids = self.default_variation.get_option_ids() if self.default_variation else {}
        self.attribute_fields = []

        for field_name, (attr_type, choices) in grouped.items():
            widget_class = get_widget_class(attr_type.element_type)
            self.fields[field_name] = forms.TypedChoiceField(
                label=attr_type.name,
                choices=choices,
                coerce=int,
                widget=widget_class(),
            )
            if field_name in default_ids:
                self.initial[field_name] = default_ids[field_name]
            self.attribute_fields.append(field_name)

    def get_attribute_choices(self):
        """Return {attribute_slug: [attribute_option_id, ...]} offered by the form."""
        return {
            field_name: [value for value, _ in self.fields[field_name].choices]
            for field_name in self.attribute_fields
        }

    def clean(self):
        cleaned_data = super().clean()
        if self.hide_form:
            raise forms.ValidationError(self.unavailable_message or 'Produto indisponível.')

        for field_name, option_ids in self.unavailable_choices.items():
            if cleaned_data.get(field_name) in option_ids:
                self.add_error(field_name, 'Opção esgotada.')
        if self.errors:
            return cleaned_data

        selections = {
            field_name: cleaned_data[field_name]
            for field_name in self.attribute_fields
            if cleaned_data.get(field_name) is not None
        }

        variant = VariantNavigationService.find_exact_variant(self.variants, selections)
        if variant is None:
            raise forms.ValidationError('Combinação indisponível.')

        cleaned_data['variant'] = variant
        return cleaned_data
