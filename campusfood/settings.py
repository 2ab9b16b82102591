# campusfood/settings.py
"""
Campusfood Django settings

CHANGE LOG
----------
2026-10-12 • Session cookie policy follows APP_ENV
- Production: SameSite=None + Secure so the SPA can call the API cross-site.
- Development: SameSite=Lax, plain HTTP.

2026-10-05 • CORS allow-list from CLIENT_URL
- Comma separated, trimmed, credentials allowed (cookie auth).
"""

from pathlib import Path
import os
from dotenv import load_dotenv

# ========= Base / Env =========
BASE_DIR = Path(__file__).resolve().parent.parent

ENV_CANDIDATES = [
    BASE_DIR / '.env',          # Local: project root
    BASE_DIR.parent / '.env',   # Local: repo root (if checked out nested)
]
for _env in ENV_CANDIDATES:
    if _env.exists():
        load_dotenv(_env)
        break
else:
    load_dotenv()  # fallback (no-op if missing)

APP_ENV = os.getenv("APP_ENV", "development").strip().lower()
IS_PRODUCTION = APP_ENV == "production"

DEBUG = os.getenv("DEBUG", "False") == "True"

# ========= Secret Key =========
DJANGO_SECRET_KEY = os.getenv("DJANGO_SECRET_KEY")
if not DJANGO_SECRET_KEY:
    if IS_PRODUCTION:
        raise ValueError("DJANGO_SECRET_KEY must be set in .env file")
    DJANGO_SECRET_KEY = "dev-insecure-campusfood-key-do-not-use-in-production"
SECRET_KEY = DJANGO_SECRET_KEY

# ========= Hosts / Security =========
ALLOWED_HOSTS = [
    "127.0.0.1",
    "localhost",
    "testserver",
] + [h.strip() for h in os.getenv("ADDITIONAL_HOSTS", "").split(",") if h.strip()]

# If behind HTTPS (recommended in production)
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
SESSION_COOKIE_SECURE = IS_PRODUCTION
CSRF_COOKIE_SECURE = IS_PRODUCTION

# ========= Installed apps =========
INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "corsheaders",
    "rest_framework",

    "food_ordering.accounts",
    "food_ordering.menu",
    "food_ordering.orders",
]

# ========= Middleware =========
# CORS middleware must stay at the very top
MIDDLEWARE = [
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "whitenoise.middleware.WhiteNoiseMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

# ========= URL / Templates / WSGI =========
ROOT_URLCONF = "campusfood.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "campusfood.wsgi.application"

# ========= Database =========
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.getenv("DATABASE_PATH") or BASE_DIR / "db.sqlite3",
        "OPTIONS": {"timeout": 30},
    }
}

# ========= Password validation =========
# Registration enforces its own minimum (6 chars); these apply to admin-created users.
AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator"},
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},
    {"NAME": "django.contrib.auth.password_validation.CommonPasswordValidator"},
    {"NAME": "django.contrib.auth.password_validation.NumericPasswordValidator"},
]

# ========= I18N =========
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# ========= Security headers =========
SECURE_CONTENT_TYPE_NOSNIFF = True
SECURE_SSL_REDIRECT = IS_PRODUCTION

if IS_PRODUCTION:
    SECURE_HSTS_SECONDS = 31536000
    SECURE_HSTS_INCLUDE_SUBDOMAINS = True

# ========= Static / Media =========
STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

# Use WhiteNoise for static file serving (admin assets)
STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {"BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage"},
}

# ========= Defaults =========
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ========= REST framework =========
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "food_ordering.accounts.authentication.CookieTokenAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "EXCEPTION_HANDLER": "food_ordering.exceptions.api_exception_handler",
    # Prices and totals travel as JSON numbers, not strings
    "COERCE_DECIMAL_TO_STRING": False,
}

# ========= CORS / CSRF (single source of truth) =========
CLIENT_URL = os.getenv("CLIENT_URL", "http://localhost:3000")
CORS_ALLOWED_ORIGINS = [o.strip() for o in CLIENT_URL.split(",") if o.strip()]
CORS_ALLOW_CREDENTIALS = True  # allow cookies across domains
CSRF_TRUSTED_ORIGINS = list(CORS_ALLOWED_ORIGINS)

# ========= Session config =========
# Admin sessions (django.contrib.sessions)
SESSION_COOKIE_AGE = 3600  # 1 hour
SESSION_EXPIRE_AT_BROWSER_CLOSE = True

# API session token (signed cookie issued by food_ordering.accounts.tokens)
SESSION_TOKEN_SECRET = os.getenv("SESSION_TOKEN_SECRET") or SECRET_KEY
SESSION_TOKEN_COOKIE_NAME = "token"
SESSION_TOKEN_MAX_AGE = 3600  # 1 hour
SESSION_TOKEN_COOKIE_SAMESITE = "None" if IS_PRODUCTION else "Lax"
SESSION_TOKEN_COOKIE_SECURE = IS_PRODUCTION

# ========= Menu defaults =========
MENU_DEFAULT_DESCRIPTION = "Custom Item"
MENU_DEFAULT_CATEGORY = "Custom"
MENU_DEFAULT_IMAGE = "https://images.unsplash.com/photo-1546069901-ba9599a7e63c"

# ========= Logging =========
LOG_DIR = BASE_DIR / 'logs'
LOG_DIR.mkdir(exist_ok=True)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {process:d} {thread:d} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'file': {
            'level': 'INFO',
            'class': 'logging.handlers.RotatingFileHandler',
            'filename': LOG_DIR / 'campusfood.log',
            'maxBytes': 1024*1024*15,
            'backupCount': 10,
            'formatter': 'verbose',
            'encoding': 'utf-8',
        },
        'console': {
            'level': 'INFO',
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'food_ordering': {
            'handlers': ['file', 'console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'django': {
            'handlers': ['file'],
            'level': 'ERROR',
            'propagate': True,
        },
    },
}
