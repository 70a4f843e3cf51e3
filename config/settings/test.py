from .base import *

# Use a fixed secret key for CI
SECRET_KEY = "django-insecure-testkey"
SIMPLE_JWT["SIGNING_KEY"] = SECRET_KEY

# Use temporary DB for CI tests
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
        "ATOMIC_REQUESTS": True,
    }
}

# Fast hashing for tests
PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

# Disable sending real emails
EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"
DEFAULT_FROM_EMAIL = "noreply@autohub.test"

# Use fake Cloudinary for tests
CLOUDINARY_STORAGE = {
    "CLOUD_NAME": "test",
    "API_KEY": "test",
    "API_SECRET": "test",
}

CHANNEL_LAYERS = {
    "default": {
        "BACKEND": "channels.layers.InMemoryChannelLayer",
    },
}

STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {"BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage"},
}

FRONTEND_BASE_URL = "https://autohub.test"

# Disable debug
DEBUG = False
