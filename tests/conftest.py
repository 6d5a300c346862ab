from decimal import Decimal

import pytest

from apps.catalog.models import (
    AttributeOption,
    AttributeType,
    Product,
    Variant,
    VariantAttribute,
)


@pytest.fixture
def color(db):
    return AttributeType.objects.create(
        name='Cor', slug='color', element_type='select', display_order=1
    )


@pytest.fixture
def size(db):
    return AttributeType.objects.create(
        name='Tamanho', slug='size', element_type='radios', display_order=2
    )


@pytest.fixture
def make_product(db, color, size):
    """
    Build a product from [((color, size), stock), ...].

    Variants get display_order in list order. Extra options (carried by no
    variant) can be given as {attribute_slug: [value, ...]}.
    """
    attribute_types = {'color': color, 'size': size}

    def _make(combinations, slug='camiseta', extra_options=None):
        product = Product.objects.create(name=slug.title(), slug=slug)

        def option(attr_type, value):
            opt, _ = AttributeOption.objects.get_or_create(
                attribute_type=attr_type,
                product=product,
                value=value,
            )
            return opt

        for index, ((color_value, size_value), stock) in enumerate(combinations):
            variant = Variant.objects.create(
                product=product,
                sku=f'{slug}-{color_value}-{size_value}'.upper(),
                sell_price=Decimal('79.90'),
                stock_quantity=stock,
                display_order=index,
            )
            VariantAttribute.objects.create(
                variant=variant, attribute_option=option(color, color_value)
            )
            VariantAttribute.objects.create(
                variant=variant, attribute_option=option(size, size_value)
            )

        for attr_slug, values in (extra_options or {}).items():
            for value in values:
                option(attribute_types[attr_slug], value)

        return product

    return _make


@pytest.fixture
def shirt(make_product):
    """
    Azul/P out, Azul/M in, Branco/P out, Branco/M unknown.
    Size P and color Branco only have out-of-stock variants.
    """
    return make_product([
        (('Azul', 'P'), 0),
        (('Azul', 'M'), 5),
        (('Branco', 'P'), 0),
        (('Branco', 'M'), None),
    ])


def option_id(product, attr_slug, value):
    return AttributeOption.objects.get(
        product=product, attribute_type__slug=attr_slug, value=value
    ).pk


@pytest.fixture
def option_ids():
    return option_id
