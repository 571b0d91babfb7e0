from django.urls import path

from src.apps.auctions import views

app_name = "auctions"
urlpatterns = [
    path('', views.auction_list, name="index"),
    path('<int:pk>/', views.auction_detail, name="show"),
]
