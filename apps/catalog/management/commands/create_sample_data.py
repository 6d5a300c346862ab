"""
Create sample products with mixed stock for trying the variation form.
Run with: python manage.py create_sample_data
"""
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.catalog.models import (
    Product,
    Variant,
    AttributeType,
    AttributeOption,
    VariantAttribute,
)

COLORS = [('Preto', '#000000'), ('Branco', '#FFFFFF'), ('Azul', '#0000FF')]
SIZES = ['P', 'M', 'G', 'GG']

# (color, size) -> stock; missing pairs get no variant, None is unknown
SHIRT_STOCK = {
    ('Preto', 'P'): 0,
    ('Preto', 'M'): 12,
    ('Preto', 'G'): 3,
    ('Branco', 'P'): 0,
    ('Branco', 'M'): None,
    ('Branco', 'G'): 0,
    ('Azul', 'P'): 8,
    ('Azul', 'M'): 0,
}


class Command(BaseCommand):
    help = 'Create sample products with in-stock and out-of-stock variants'

    @transaction.atomic
    def handle(self, *args, **options):
        color, _ = AttributeType.objects.get_or_create(
            slug='color',
            defaults={'name': 'Cor', 'element_type': AttributeType.ELEMENT_RENDERED, 'display_order': 1}
        )
        size, _ = AttributeType.objects.get_or_create(
            slug='size',
            defaults={'name': 'Tamanho', 'element_type': AttributeType.ELEMENT_RADIOS, 'display_order': 2}
        )

        shirt, _ = Product.objects.get_or_create(
            slug='camiseta-basica',
            defaults={'name': 'Camiseta Básica', 'description': 'Camiseta de algodão confortável'}
        )
        sold_out, _ = Product.objects.get_or_create(
            slug='calca-jeans',
            defaults={'name': 'Calça Jeans', 'description': 'Calça jeans clássica'}
        )

        color_options = {}
        for i, (value, hex_code) in enumerate(COLORS):
            color_options[value], _ = AttributeOption.objects.get_or_create(
                attribute_type=color,
                product=shirt,
                value=value,
                defaults={'color_hex': hex_code, 'display_order': i}
            )

        size_options = {}
        for i, value in enumerate(SIZES):
            size_options[value], _ = AttributeOption.objects.get_or_create(
                attribute_type=size,
                product=shirt,
                value=value,
                defaults={'display_order': i}
            )

        for order, ((color_value, size_value), stock) in enumerate(SHIRT_STOCK.items()):
            variant, created = Variant.objects.get_or_create(
                sku=f'CAM-{color_value[:3].upper()}-{size_value}',
                defaults={
                    'product': shirt,
                    'name': f'Camiseta {color_value} {size_value}',
                    'sell_price': Decimal('79.90'),
                    'stock_quantity': stock,
                    'display_order': order,
                }
            )
            if created:
                VariantAttribute.objects.create(variant=variant, attribute_option=color_options[color_value])
                VariantAttribute.objects.create(variant=variant, attribute_option=size_options[size_value])

        for order, value in enumerate(SIZES[:2]):
            option, _ = AttributeOption.objects.get_or_create(
                attribute_type=size, product=sold_out, value=value,
                defaults={'display_order': order}
            )
            variant, created = Variant.objects.get_or_create(
                sku=f'CAL-{value}',
                defaults={
                    'product': sold_out,
                    'name': f'Calça Jeans {value}',
                    'sell_price': Decimal('189.90'),
                    'stock_quantity': 0,
                    'display_order': order,
                }
            )
            if created:
                VariantAttribute.objects.create(variant=variant, attribute_option=option)

        self.stdout.write(self.style.SUCCESS(
            f'{Product.objects.count()} products, {Variant.objects.count()} variants, '
            f'{AttributeOption.objects.count()} attribute options'
        ))
