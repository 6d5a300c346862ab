from django.urls import path
from . import views

app_name = 'catalog'

urlpatterns = [
    path('products/<slug:slug>/', views.product_detail, name='product_detail'),
    path('products/<slug:slug>/variation/', views.variation_change, name='variation_change'),
]
