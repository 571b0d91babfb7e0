from django.urls import path

from src.apps.bids import views

app_name = "bids"
urlpatterns = [
    path('bids/', views.bid_list, name="index"),
    path('auctions/<int:auction_id>/bids/', views.create_bid, name="create"),
]
