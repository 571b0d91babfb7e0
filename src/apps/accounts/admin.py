from django.contrib import admin
from .models import Profile

@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ("user", "card_last4", "card_expires_on", "updated_at")
    search_fields = ("user__username", "user__email")
