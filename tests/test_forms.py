"""Tests for the stock-aware variation form."""
import re

from apps.catalog.forms import VariationAttributesForm
from apps.stock_filter.widgets import StockAwareRadioSelect, StockAwareSelect

DISABLED_ATTR = re.compile(r'\sdisabled(?=[\s>])')


def render_option(html, value):
    match = re.search(r'(<option value="%s"[^>]*>)([^<]*)</option>' % value, html)
    assert match, f"option {value} not rendered"
    return match.group(1), match.group(2)


def render_radio(html, value):
    match = re.search(r'<input[^>]*type="radio"[^>]*value="%s"[^>]*>' % value, html)
    assert match, f"radio {value} not rendered"
    return match.group(0)


def test_default_is_first_in_stock_variant(shirt, option_ids):
    form = VariationAttributesForm(product=shirt)

    assert form.default_variation.sku == 'CAMISETA-AZUL-M'
    assert form.initial['color'] == option_ids(shirt, 'color', 'Azul')
    assert form.initial['size'] == option_ids(shirt, 'size', 'M')


def test_default_kept_when_already_in_stock(make_product):
    product = make_product([(('Azul', 'P'), 2), (('Azul', 'M'), 5)])
    form = VariationAttributesForm(product=product)
    assert form.default_variation.sku == 'CAMISETA-AZUL-P'


def test_default_falls_back_to_first_variant_when_all_out(make_product):
    product = make_product([(('Azul', 'P'), 0), (('Azul', 'M'), None)])
    form = VariationAttributesForm(product=product)
    assert form.default_variation.sku == 'CAMISETA-AZUL-P'


def test_form_hidden_when_all_variants_out_of_stock(make_product):
    product = make_product([(('Azul', 'P'), 0), (('Branco', 'M'), -1)])
    form = VariationAttributesForm(product=product)

    assert form.hide_form is True
    assert form.all_out_of_stock is True
    assert form.unavailable_message == 'Produto esgotado'


def test_form_without_variants_is_not_hidden(db):
    from apps.catalog.models import Product

    product = Product.objects.create(name='Vazio', slug='vazio')
    form = VariationAttributesForm(product=product)
    assert form.hide_form is False
    assert form.default_variation is None


def test_select_options_disabled_and_labelled(shirt, option_ids):
    form = VariationAttributesForm(product=shirt)
    widget = form.fields['color'].widget
    html = str(form['color'])

    assert isinstance(widget, StockAwareSelect)
    branco = option_ids(shirt, 'color', 'Branco')
    azul = option_ids(shirt, 'color', 'Azul')

    attrs, label = render_option(html, branco)
    assert DISABLED_ATTR.search(attrs)
    assert label == 'Branco (Esgotado)'

    attrs, label = render_option(html, azul)
    assert not DISABLED_ATTR.search(attrs)
    assert label == 'Azul'

    assert f'data-stock-disabled="[{branco}]"' in html
    assert 'stock-variation-filter--processed' in html


def test_radio_options_disabled_with_wrapper_class(shirt, option_ids):
    form = VariationAttributesForm(product=shirt)
    html = str(form['size'])

    assert isinstance(form.fields['size'].widget, StockAwareRadioSelect)
    small = render_radio(html, option_ids(shirt, 'size', 'P'))
    medium = render_radio(html, option_ids(shirt, 'size', 'M'))

    assert DISABLED_ATTR.search(small)
    assert not DISABLED_ATTR.search(medium)
    assert html.count('form-item-disabled') == 1


def test_rendered_swatches_only_flag_wrapper(shirt, size, option_ids):
    size.element_type = 'rendered'
    size.save()

    form = VariationAttributesForm(product=shirt)
    html = str(form['size'])

    small = render_radio(html, option_ids(shirt, 'size', 'P'))
    assert not DISABLED_ATTR.search(small)
    assert 'form-item-disabled' in html


def test_option_without_variants_is_disabled(make_product, option_ids):
    product = make_product(
        [(('Azul', 'P'), 3), (('Azul', 'M'), 1)],
        extra_options={'color': ['Preto']},
    )
    form = VariationAttributesForm(product=product)

    preto = option_ids(product, 'color', 'Preto')
    attrs, label = render_option(str(form['color']), preto)
    assert DISABLED_ATTR.search(attrs)
    assert label == 'Preto (Esgotado)'


def test_nothing_disabled_when_every_value_has_stock(make_product):
    product = make_product([
        (('Vermelho', 'P'), 0),
        (('Vermelho', 'G'), 5),
        (('Azul', 'P'), 3),
    ])
    form = VariationAttributesForm(product=product)

    for field_name in form.attribute_fields:
        assert 'data-stock-disabled' not in form.fields[field_name].widget.attrs


def test_excluded_dimension_is_left_alone(shirt, settings):
    settings.STOCK_FILTER = {'ATTRIBUTE_DIMENSIONS': ['size']}

    form = VariationAttributesForm(product=shirt)
    assert 'data-stock-disabled' not in form.fields['color'].widget.attrs
    assert 'data-stock-disabled' in form.fields['size'].widget.attrs


def test_plain_widgets_only_get_data_attribute(shirt, settings, option_ids):
    settings.CATALOG_VARIATION_WIDGETS = {
        'select': 'django.forms.Select',
        'radios': 'django.forms.RadioSelect',
    }
    form = VariationAttributesForm(product=shirt)
    html = str(form['color'])

    branco = option_ids(shirt, 'color', 'Branco')
    attrs, label = render_option(html, branco)
    assert not DISABLED_ATTR.search(attrs)
    assert label == 'Branco'
    assert form.fields['color'].widget.attrs['data-stock-disabled'] == f'[{branco}]'


def test_form_media_includes_stock_filter_script(shirt):
    form = VariationAttributesForm(product=shirt)
    assert 'stock_filter/js/stock_filter.js' in str(form.media)


def test_clean_resolves_selected_variant(shirt, option_ids):
    form = VariationAttributesForm(
        data={
            'quantity': 2,
            'color': option_ids(shirt, 'color', 'Azul'),
            'size': option_ids(shirt, 'size', 'M'),
        },
        product=shirt,
    )

    assert form.is_valid(), form.errors
    assert form.cleaned_data['variant'].sku == 'CAMISETA-AZUL-M'


def test_clean_rejects_missing_combination(make_product, option_ids):
    product = make_product([(('Azul', 'P'), 3), (('Branco', 'M'), 1)])
    form = VariationAttributesForm(
        data={
            'quantity': 1,
            'color': option_ids(product, 'color', 'Azul'),
            'size': option_ids(product, 'size', 'M'),
        },
        product=product,
    )

    assert not form.is_valid()
    assert 'Combinação indisponível.' in form.non_field_errors()


def test_disabled_selection_falls_back_to_first_enabled_option(make_product, option_ids):
    product = make_product([
        (('Branco', 'P'), 0),
        (('Azul', 'P'), 4),
        (('Azul', 'M'), 0),
    ])
    form = VariationAttributesForm(
        data={
            'quantity': 1,
            'color': option_ids(product, 'color', 'Branco'),
            'size': option_ids(product, 'size', 'M'),
        },
        product=product,
    )

    attrs, _ = render_option(str(form['color']), option_ids(product, 'color', 'Azul'))
    assert 'selected' in attrs
    attrs, _ = render_option(str(form['color']), option_ids(product, 'color', 'Branco'))
    assert 'selected' not in attrs

    small = render_radio(str(form['size']), option_ids(product, 'size', 'P'))
    assert 'checked' in small


def test_clean_rejects_out_of_stock_option(shirt, option_ids):
    form = VariationAttributesForm(
        data={
            'quantity': 1,
            'color': option_ids(shirt, 'color', 'Branco'),
            'size': option_ids(shirt, 'size', 'P'),
        },
        product=shirt,
    )

    assert not form.is_valid()
    assert form.errors['color'] == ['Opção esgotada.']
    assert form.errors['size'] == ['Opção esgotada.']
    assert 'variant' not in form.cleaned_data


def test_clean_rejects_when_form_hidden(make_product, option_ids):
    product = make_product([(('Azul', 'P'), 0), (('Azul', 'M'), None)])
    form = VariationAttributesForm(
        data={
            'quantity': 1,
            'color': option_ids(product, 'color', 'Azul'),
            'size': option_ids(product, 'size', 'P'),
        },
        product=product,
    )

    assert not form.is_valid()
    assert form.non_field_errors() == ['Produto esgotado']
