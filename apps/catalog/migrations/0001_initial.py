# Generated manually

import django.core.validators
import django.db.models.deletion
from decimal import Decimal
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='AttributeType',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, verbose_name='Nome')),
                ('slug', models.SlugField(max_length=100, unique=True, verbose_name='Slug')),
                ('element_type', models.CharField(
                    choices=[
                        ('select', 'Lista de seleção'),
                        ('radios', 'Botões de opção'),
                        ('rendered', 'Amostras renderizadas'),
                    ],
                    default='select',
                    max_length=20,
                    verbose_name='Tipo de elemento'
                )),
                ('display_order', models.PositiveIntegerField(default=0, verbose_name='Ordem de exibição')),
            ],
            options={
                'verbose_name': 'Tipo de Atributo',
                'verbose_name_plural': 'Tipos de Atributos',
                'ordering': ['display_order', 'name'],
            },
        ),
        migrations.CreateModel(
            name='Product',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255, verbose_name='Nome')),
                ('slug', models.SlugField(max_length=255, unique=True, verbose_name='Slug')),
                ('description', models.TextField(blank=True, verbose_name='Descrição')),
                ('is_active', models.BooleanField(default=True, verbose_name='Ativo')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Criado em')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Atualizado em')),
            ],
            options={
                'verbose_name': 'Produto',
                'verbose_name_plural': 'Produtos',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='AttributeOption',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('value', models.CharField(max_length=100, verbose_name='Valor')),
                ('display_value', models.CharField(blank=True, max_length=100, verbose_name='Valor de exibição')),
                ('color_hex', models.CharField(
                    blank=True,
                    help_text='Para amostras de cor (#RRGGBB)',
                    max_length=7,
                    validators=[django.core.validators.RegexValidator(
                        message='Cor deve estar no formato hexadecimal (#RRGGBB)',
                        regex='^#[0-9A-Fa-f]{6}$'
                    )],
                    verbose_name='Cor Hex'
                )),
                ('display_order', models.PositiveIntegerField(default=0, verbose_name='Ordem de exibição')),
                ('attribute_type', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='options',
                    to='catalog.attributetype',
                    verbose_name='Tipo de Atributo'
                )),
                ('product', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='attribute_options',
                    to='catalog.product',
                    verbose_name='Produto'
                )),
            ],
            options={
                'verbose_name': 'Opção de Atributo',
                'verbose_name_plural': 'Opções de Atributos',
                'ordering': ['display_order', 'value'],
                'unique_together': {('attribute_type', 'product', 'value')},
            },
        ),
        migrations.CreateModel(
            name='Variant',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('sku', models.CharField(max_length=100, unique=True, verbose_name='SKU')),
                ('name', models.CharField(
                    blank=True,
                    help_text='Nome personalizado (gerado automaticamente se vazio)',
                    max_length=255,
                    verbose_name='Nome'
                )),
                ('sell_price', models.DecimalField(
                    decimal_places=2,
                    max_digits=10,
                    validators=[django.core.validators.MinValueValidator(Decimal('0.00'))],
                    verbose_name='Preço de venda'
                )),
                ('stock_quantity', models.IntegerField(blank=True, null=True, verbose_name='Quantidade em estoque')),
                ('display_order', models.PositiveIntegerField(default=0, verbose_name='Ordem de exibição')),
                ('is_active', models.BooleanField(default=True, verbose_name='Ativo')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Criado em')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Atualizado em')),
                ('product', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='variants',
                    to='catalog.product',
                    verbose_name='Produto'
                )),
            ],
            options={
                'verbose_name': 'Variante',
                'verbose_name_plural': 'Variantes',
                'ordering': ['product', 'display_order', 'sku'],
            },
        ),
        migrations.CreateModel(
            name='VariantAttribute',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('attribute_option', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    to='catalog.attributeoption',
                    verbose_name='Opção de Atributo'
                )),
                ('variant', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    to='catalog.variant',
                    verbose_name='Variante'
                )),
            ],
            options={
                'verbose_name': 'Atributo da Variante',
                'verbose_name_plural': 'Atributos das Variantes',
                'unique_together': {('variant', 'attribute_option')},
            },
        ),
        migrations.AddField(
            model_name='variant',
            name='attribute_options',
            field=models.ManyToManyField(
                related_name='variants',
                through='catalog.VariantAttribute',
                to='catalog.attributeoption',
                verbose_name='Opções de atributos'
            ),
        ),
    ]
