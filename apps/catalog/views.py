import json
import logging

from django.http import Http404, JsonResponse
from django.shortcuts import get_object_or_404, render
from django.views.decorators.http import require_http_methods

from .events import ProductVariationAjaxChangeEvent, product_variation_ajax_change
from .forms import VariationAttributesForm
from .models import Product
from .services import VariantNavigationService

logger = logging.getLogger(__name__)


def _serialize_variant(variant):
    return {
        'id': variant.id,
        'sku': variant.sku,
        'name': str(variant),
        'sell_price': str(variant.sell_price),
        'options': variant.get_option_ids(),
    }


@require_http_methods(["GET", "POST"])
def product_detail(request, slug):
    """Product page with the add-to-cart form."""
    product = get_object_or_404(Product, slug=slug, is_active=True)

    if request.method == 'POST':
        form = VariationAttributesForm(request.POST, product=product)
        if form.is_valid():
            variant = form.cleaned_data['variant']
            logger.info(
                "Variant %s selected (quantity %s)",
                variant.sku, form.cleaned_data['quantity']
            )
    else:
        form = VariationAttributesForm(product=product)

    return render(request, 'catalog/product_detail.html', {
        'product': product,
        'form': form,
        'default_variation': form.default_variation,
    })


@require_http_methods(["POST"])
def variation_change(request, slug):
    """
    AJAX endpoint called whenever the shopper changes an attribute.

    Expected payload:
    {
        "selections": {"color": 3, "size": 7}
    }
    """
    product = get_object_or_404(Product, slug=slug, is_active=True)

    try:
        data = json.loads(request.body or b'{}')
        selections = {
            str(attr_slug): int(option_id)
            for attr_slug, option_id in (data.get('selections') or {}).items()
        }
    except (ValueError, TypeError, AttributeError):
        return JsonResponse({'error': 'Invalid selections'}, status=400)

    variants = product.get_enabled_variants()
    variant = VariantNavigationService.find_best_matching_variant(variants, selections)
    if variant is None:
        raise Http404('Product has no enabled variants')

    event = ProductVariationAjaxChangeEvent(
        product=product,
        variation=variant,
        variations=variants,
    )
    product_variation_ajax_change.send(sender=Product, event=event)

    return JsonResponse({
        'variation': _serialize_variant(event.variation),
        'commands': event.response.commands,
    })
