from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path('admin/', admin.site.urls),
    path('catalog/', include('apps.catalog.urls')),
    path('api/', include('apps.catalog.api.urls')),
    path('api/stock-filter/', include('apps.stock_filter.api.urls')),
]
