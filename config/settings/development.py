"""
Development settings for the blog project.
"""
from .base import *

DEBUG = True

# Use SQLite for development if no DATABASE_URL is set
DATABASES = {
    'default': env.db('DATABASE_URL', default=f'sqlite:///{BASE_DIR}/db.sqlite3'),
}

# Plain static storage so runserver works without collectstatic
STORAGES = {
    "default": {
        "BACKEND": "django.core.files.storage.FileSystemStorage",
    },
    "staticfiles": {
        "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage",
    },
}

LOGGING['loggers']['apps']['level'] = env('LOG_LEVEL', default='DEBUG')
