from rest_framework import serializers


class StockFilterPayloadSerializer(serializers.Serializer):
    """
    Stock data consumed by stock_filter.js.

    Keys are camelCase since the payload goes to the browser as is.
    """
    stockMap = serializers.DictField(child=serializers.BooleanField())
    disabledAttributes = serializers.DictField(
        child=serializers.ListField(child=serializers.IntegerField())
    )
    selectedVariationId = serializers.IntegerField(allow_null=True)
    selectedVariationInStock = serializers.BooleanField()
