from django.urls import path
from . import views

app_name = 'posts'

urlpatterns = [
    # Admin URLs
    path('admin', views.admin_index, name='admin_index'),
    path('admin/<path:slug>', views.admin_post, name='admin_post'),

    # Public URLs
    path('', views.post_list, name='post_list'),
    path('<path:slug>', views.post_detail, name='post_detail'),
]
