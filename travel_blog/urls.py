"""
URL configuration for django-travel-blog.

Include in your project urls.py:

    path('api/', include('travel_blog.urls')),
"""
from django.urls import path

from . import views

app_name = "travel_blog"

urlpatterns = [
    path("posts/<slug:slug>/related/", views.RelatedPostsView.as_view(), name="related_posts"),
    path("posts/<slug:slug>/views/", views.PostViewCountView.as_view(), name="post_views"),
]
