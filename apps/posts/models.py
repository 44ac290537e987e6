from django.db import models
from django.urls import reverse


class Post(models.Model):
    """Blog post written in markdown, looked up by slug."""

    slug = models.TextField(unique=True)
    title = models.TextField()
    markdown = models.TextField()

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return self.title

    def get_absolute_url(self):
        return reverse('posts:post_detail', kwargs={'slug': self.slug})

    def get_admin_url(self):
        return reverse('posts:admin_post', kwargs={'slug': self.slug})
