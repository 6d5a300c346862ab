from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.catalog.models import Product
from apps.stock_filter.services import (
    StockHelper,
    known_attribute_values,
    snapshot_variations,
)
from .serializers import StockFilterPayloadSerializer


class ProductStockView(APIView):
    """
    Stock availability of every enabled variant of a product.

    Query params:
    - variation: Optional id of the currently selected variant
    """

    def get(self, request, slug):
        product = get_object_or_404(Product, slug=slug, is_active=True)
        variants = product.get_enabled_variants()
        variations = snapshot_variations(variants)

        selected = None
        variation_id = request.query_params.get('variation')
        if variation_id:
            selected = next(
                (v for v in variations if str(v.id) == variation_id), None
            )
            if selected is None:
                return Response(
                    {'error': 'Variation not found'},
                    status=status.HTTP_404_NOT_FOUND
                )

        payload = StockHelper.build_refresh_payload(
            variations,
            selected=selected,
            known_values=known_attribute_values(product),
        )
        return Response(StockFilterPayloadSerializer(payload).data)
