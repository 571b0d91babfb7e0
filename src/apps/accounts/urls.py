from django.contrib.auth import views as auth_views
from django.urls import path

from src.apps.accounts import views

app_name = "accounts"
urlpatterns = [
    path('login/', auth_views.LoginView.as_view(template_name="accounts/login.html"), name="login"),
    path('logout/', auth_views.LogoutView.as_view(), name="logout"),
    path('profile/edit/', views.edit_profile, name="edit_profile"),
]
