from django.apps import AppConfig


class StockFilterConfig(AppConfig):
    name = 'apps.stock_filter'
    verbose_name = 'Filtro de estoque'

    def ready(self):
        from . import signals  # noqa: F401
