from django.contrib import admin
from .models import Auction, Product


class AuctionInline(admin.TabularInline):
    model = Auction
    extra = 0


class ProductAdmin(admin.ModelAdmin):
    list_display = ('name', 'created_at')
    search_fields = ('name', 'description')
    inlines = [AuctionInline]


class AuctionAdmin(admin.ModelAdmin):
    list_display = ('title', 'product', 'starting_price', 'created_at')
    search_fields = ('title', 'product__name')
    list_select_related = ('product',)


admin.site.register(Product, ProductAdmin)
admin.site.register(Auction, AuctionAdmin)
