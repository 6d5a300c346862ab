import logging

from rest_framework import viewsets, filters
from rest_framework.decorators import action
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response
from django_filters.rest_framework import DjangoFilterBackend

from apps.catalog.models import Product, AttributeType, Variant
from .serializers import (
    ProductSerializer,
    ProductDetailSerializer,
    AttributeTypeSerializer,
    VariantSerializer,
    BulkStockUpdateSerializer,
)
from .filters import VariantFilter

logger = logging.getLogger(__name__)


class ProductViewSet(viewsets.ReadOnlyModelViewSet):
    """
    API endpoint for products.

    list: List active products
    retrieve: Get product detail with enabled variants
    """
    queryset = Product.objects.filter(is_active=True)
    lookup_field = 'slug'
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['name', 'description']
    ordering_fields = ['name', 'created_at']
    ordering = ['name']

    def get_serializer_class(self):
        if self.action == 'retrieve':
            return ProductDetailSerializer
        return ProductSerializer

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action == 'retrieve':
            queryset = queryset.prefetch_related('attribute_options__attribute_type')
        return queryset


class AttributeTypeViewSet(viewsets.ReadOnlyModelViewSet):
    """
    API endpoint for attribute types (Color, Size, etc).
    """
    queryset = AttributeType.objects.all()
    serializer_class = AttributeTypeSerializer
    lookup_field = 'slug'
    pagination_class = None


class VariantViewSet(viewsets.ReadOnlyModelViewSet):
    """
    API endpoint for variants.

    Supports filtering by product, attributes, price range, stock status.
    """
    queryset = Variant.objects.select_related('product').prefetch_related(
        'variantattribute_set__attribute_option__attribute_type'
    )
    serializer_class = VariantSerializer
    filterset_class = VariantFilter
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['sku', 'name', 'product__name']
    ordering_fields = ['sku', 'sell_price', 'stock_quantity', 'display_order']
    ordering = ['product', 'display_order', 'sku']

    @action(detail=False, methods=['post'], permission_classes=[IsAdminUser])
    def bulk_update_stock(self, request):
        """
        Bulk update variant stock quantities.

        Expected payload:
        {
            "updates": [
                {"id": 1, "stock_quantity": 100},
                {"id": 2, "stock_quantity": null}
            ]
        }
        """
        serializer = BulkStockUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        updated_ids = []
        for update in serializer.validated_data['updates']:
            try:
                variant = Variant.objects.get(pk=update['id'])
            except Variant.DoesNotExist:
                logger.warning("Variant %s not found, stock not updated", update['id'])
                continue

            # save() so the change lands in the variant history
            variant.stock_quantity = update['stock_quantity']
            variant.save()
            updated_ids.append(variant.pk)

        logger.info("Stock updated for %d variants", len(updated_ids))
        return Response({'updated': len(updated_ids), 'ids': updated_ids})
