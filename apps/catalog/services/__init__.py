from .variant_navigation import VariantNavigationService

__all__ = ['VariantNavigationService']
