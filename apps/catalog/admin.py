from django.contrib import admin
from django.utils.html import format_html
from import_export import resources, fields
from import_export.admin import ImportExportModelAdmin
from import_export.widgets import ForeignKeyWidget
from adminsortable2.admin import SortableAdminMixin, SortableAdminBase, SortableInlineAdminMixin
from simple_history.admin import SimpleHistoryAdmin

from .models import (
    Product,
    AttributeType,
    AttributeOption,
    Variant,
    VariantAttribute,
)


# =============================================================================
# Import/Export Resources
# =============================================================================

class VariantResource(resources.ModelResource):
    """Stock sheet: one row per SKU, an empty stock cell means unknown."""

    product_slug = fields.Field(
        column_name='product',
        attribute='product',
        widget=ForeignKeyWidget(Product, 'slug')
    )

    class Meta:
        model = Variant
        import_id_fields = ['sku']
        fields = (
            'sku', 'product_slug', 'name', 'sell_price',
            'stock_quantity', 'display_order', 'is_active'
        )
        export_order = fields
        skip_unchanged = True
        report_skipped = False


# =============================================================================
# Inlines
# =============================================================================

class AttributeOptionInline(SortableInlineAdminMixin, admin.TabularInline):
    model = AttributeOption
    extra = 1
    fields = ['attribute_type', 'value', 'display_value', 'color_hex', 'display_order']


class VariantAttributeInline(admin.TabularInline):
    model = VariantAttribute
    extra = 1
    autocomplete_fields = ['attribute_option']


class VariantInline(admin.TabularInline):
    model = Variant
    extra = 0
    fields = ['sku', 'name', 'sell_price', 'stock_quantity', 'display_order', 'is_active']
    readonly_fields = ['sku', 'name']
    show_change_link = True
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


# =============================================================================
# Model Admins
# =============================================================================

@admin.register(Product)
class ProductAdmin(SortableAdminBase, SimpleHistoryAdmin):
    list_display = ['name', 'slug', 'variant_count', 'is_active', 'created_at']
    list_filter = ['is_active', 'created_at']
    search_fields = ['name', 'slug', 'description']
    prepopulated_fields = {'slug': ('name',)}
    inlines = [AttributeOptionInline, VariantInline]


@admin.register(AttributeType)
class AttributeTypeAdmin(SortableAdminMixin, admin.ModelAdmin):
    list_display = ['name', 'slug', 'element_type', 'option_count']
    search_fields = ['name', 'slug']
    prepopulated_fields = {'slug': ('name',)}

    @admin.display(description='Opções')
    def option_count(self, obj):
        return obj.options.count()


@admin.register(AttributeOption)
class AttributeOptionAdmin(admin.ModelAdmin):
    list_display = ['value', 'display_value', 'attribute_type', 'product', 'color_swatch', 'display_order']
    list_filter = ['attribute_type']
    search_fields = ['value', 'display_value', 'attribute_type__name', 'product__name']
    autocomplete_fields = ['attribute_type', 'product']

    @admin.display(description='Cor')
    def color_swatch(self, obj):
        if obj.color_hex:
            return format_html(
                '<div style="width: 20px; height: 20px; background-color: {}; '
                'border: 1px solid #ccc; border-radius: 3px;"></div>',
                obj.color_hex
            )
        return '-'


@admin.register(Variant)
class VariantAdmin(ImportExportModelAdmin, SimpleHistoryAdmin):
    resource_class = VariantResource
    list_display = [
        'sku', 'name', 'product', 'sell_price',
        'stock_quantity', 'stock_status', 'is_active'
    ]
    list_filter = ['product', 'is_active']
    list_editable = ['stock_quantity', 'is_active']
    search_fields = ['sku', 'name', 'product__name']
    autocomplete_fields = ['product']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [VariantAttributeInline]
    list_per_page = 50

    actions = ['mark_out_of_stock', 'clear_stock']

    @admin.display(description='Status Estoque')
    def stock_status(self, obj):
        if obj.stock_quantity is None:
            color, label = 'gray', 'Desconhecido'
        elif obj.is_in_stock:
            color, label = 'green', 'Em estoque'
        else:
            color, label = 'red', 'Sem estoque'
        return format_html('<span style="color: {};">{}</span>', color, label)

    @admin.action(description='Marcar como sem estoque')
    def mark_out_of_stock(self, request, queryset):
        count = queryset.update(stock_quantity=0)
        self.message_user(request, f'{count} variantes atualizadas.')

    @admin.action(description='Limpar quantidade em estoque')
    def clear_stock(self, request, queryset):
        count = queryset.update(stock_quantity=None)
        self.message_user(request, f'{count} variantes atualizadas.')


admin.site.site_header = 'Ecommerce Admin'
admin.site.site_title = 'Ecommerce'
admin.site.index_title = 'Painel de Administração'
