from django.urls import path
from . import views

app_name = "users"

urlpatterns = [
    path("auth/register", views.RegisterView.as_view(), name="register"),
    path("auth/login", views.LoginView.as_view(), name="login"),
    path("user/avatar", views.AvatarView.as_view(), name="avatar"),
    path("user/cover-photo", views.CoverPhotoView.as_view(), name="cover-photo"),
    path("user/profile", views.ProfileView.as_view(), name="profile"),
    path("users/<str:user_id>", views.UserDetailView.as_view(), name="user-detail"),
]
