from rest_framework import serializers
from apps.catalog.models import (
    Product,
    AttributeType,
    AttributeOption,
    Variant,
    VariantAttribute,
)


class AttributeOptionSerializer(serializers.ModelSerializer):
    attribute_type_slug = serializers.CharField(
        source='attribute_type.slug', read_only=True
    )

    class Meta:
        model = AttributeOption
        fields = [
            'id', 'attribute_type', 'attribute_type_slug',
            'value', 'display_value', 'color_hex', 'display_order'
        ]


class AttributeTypeSerializer(serializers.ModelSerializer):
    class Meta:
        model = AttributeType
        fields = ['id', 'name', 'slug', 'element_type', 'display_order']


class VariantAttributeSerializer(serializers.ModelSerializer):
    attribute_slug = serializers.CharField(
        source='attribute_option.attribute_type.slug', read_only=True
    )
    value = serializers.CharField(
        source='attribute_option.value', read_only=True
    )
    display_value = serializers.CharField(
        source='attribute_option.get_display_value', read_only=True
    )

    class Meta:
        model = VariantAttribute
        fields = ['id', 'attribute_option', 'attribute_slug', 'value', 'display_value']


class VariantSerializer(serializers.ModelSerializer):
    product_slug = serializers.CharField(source='product.slug', read_only=True)
    attributes = VariantAttributeSerializer(
        source='variantattribute_set', many=True, read_only=True
    )
    is_in_stock = serializers.BooleanField(read_only=True)

    class Meta:
        model = Variant
        fields = [
            'id', 'product', 'product_slug', 'sku', 'name', 'sell_price',
            'stock_quantity', 'is_in_stock', 'display_order', 'is_active',
            'attributes'
        ]


class ProductSerializer(serializers.ModelSerializer):
    variant_count = serializers.IntegerField(read_only=True)

    class Meta:
        model = Product
        fields = ['id', 'name', 'slug', 'description', 'is_active', 'variant_count']


class ProductDetailSerializer(ProductSerializer):
    variants = serializers.SerializerMethodField()
    attribute_options = AttributeOptionSerializer(many=True, read_only=True)

    class Meta(ProductSerializer.Meta):
        fields = ProductSerializer.Meta.fields + ['attribute_options', 'variants']

    def get_variants(self, obj):
        return VariantSerializer(obj.get_enabled_variants(), many=True).data


class StockUpdateSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    stock_quantity = serializers.IntegerField(allow_null=True)


class BulkStockUpdateSerializer(serializers.Serializer):
    updates = StockUpdateSerializer(many=True)
