"""
URL configuration for the blog project.
"""
from django.contrib import admin
from django.urls import path, include
from django.views.generic import RedirectView

urlpatterns = [
    path('admin/', admin.site.urls),
    path('accounts/', include('allauth.urls')),
    path('posts/', include('apps.posts.urls')),
    path('', RedirectView.as_view(pattern_name='posts:post_list', permanent=False)),
]
