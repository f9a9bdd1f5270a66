from django.urls import path
from . import views

app_name = "feed"

urlpatterns = [
    path("posts", views.PostListCreateView.as_view(), name="post-list-create"),
    path("posts/<str:post_id>", views.PostDetailView.as_view(), name="post-detail"),
    path("posts/<str:post_id>/reactions", views.ReactionView.as_view(), name="post-reactions"),
    path("posts/<str:post_id>/comments", views.CommentCreateView.as_view(), name="post-comments"),
]
