from django.db import models
from django.core.validators import RegexValidator


class AttributeType(models.Model):
    """
    A dimension along which variants of a product differ.
    Examples: Color, Size, Length.

    element_type decides how the add-to-cart form renders the choice.
    """
    ELEMENT_SELECT = 'select'
    ELEMENT_RADIOS = 'radios'
    ELEMENT_RENDERED = 'rendered'

    ELEMENT_TYPE_CHOICES = [
        (ELEMENT_SELECT, 'Lista de seleção'),
        (ELEMENT_RADIOS, 'Botões de opção'),
        (ELEMENT_RENDERED, 'Amostras renderizadas'),
    ]

    name = models.CharField(
        max_length=100,
        verbose_name='Nome'
    )
    slug = models.SlugField(
        max_length=100,
        unique=True,
        verbose_name='Slug'
    )
    element_type = models.CharField(
        max_length=20,
        choices=ELEMENT_TYPE_CHOICES,
        default=ELEMENT_SELECT,
        verbose_name='Tipo de elemento'
    )
    display_order = models.PositiveIntegerField(
        default=0,
        verbose_name='Ordem de exibição'
    )

    class Meta:
        ordering = ['display_order', 'name']
        verbose_name = 'Tipo de Atributo'
        verbose_name_plural = 'Tipos de Atributos'

    def __str__(self):
        return self.name


class AttributeOption(models.Model):
    """
    A value of an attribute type, always linked to a product.

    An option may be carried by no active variant at all (the variant was
    disabled or removed); it is still offered by the form.
    """
    hex_color_validator = RegexValidator(
        regex=r'^#[0-9A-Fa-f]{6}$',
        message='Cor deve estar no formato hexadecimal (#RRGGBB)'
    )

    attribute_type = models.ForeignKey(
        AttributeType,
        on_delete=models.CASCADE,
        related_name='options',
        verbose_name='Tipo de Atributo'
    )
    product = models.ForeignKey(
        'catalog.Product',
        on_delete=models.CASCADE,
        related_name='attribute_options',
        verbose_name='Produto'
    )
    value = models.CharField(
        max_length=100,
        verbose_name='Valor'
    )
    display_value = models.CharField(
        max_length=100,
        blank=True,
        verbose_name='Valor de exibição'
    )
    color_hex = models.CharField(
        max_length=7,
        blank=True,
        validators=[hex_color_validator],
        verbose_name='Cor Hex',
        help_text='Para amostras de cor (#RRGGBB)'
    )
    display_order = models.PositiveIntegerField(
        default=0,
        verbose_name='Ordem de exibição'
    )

    class Meta:
        ordering = ['display_order', 'value']
        unique_together = ['attribute_type', 'product', 'value']
        verbose_name = 'Opção de Atributo'
        verbose_name_plural = 'Opções de Atributos'

    def __str__(self):
        return f"{self.attribute_type.name}: {self.get_display_value()}"

    def get_display_value(self):
        return self.display_value or self.value
