from django.urls import path

from .views import ProductStockView

urlpatterns = [
    path('products/<slug:slug>/', ProductStockView.as_view(), name='stock-filter-product'),
]
