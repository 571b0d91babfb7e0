from django.contrib import admin
from django.urls import include, path
from django.views.generic import RedirectView

urlpatterns = [
    path("admin/", admin.site.urls),
    path("accounts/", include("src.apps.accounts.urls")),
    path("auctions/", include("src.apps.auctions.urls")),
    path("", include("src.apps.bids.urls")),
    path("", RedirectView.as_view(pattern_name="auctions:index", permanent=False)),
]
