"""
settings.py — Django project configuration for the Noticeboard backend

What this file configures
===============================================================================
- Core Django wiring (INSTALLED_APPS, MIDDLEWARE, TEMPLATES, DB)
- REST Framework defaults (JWT + session auth, JSON/form parsers)
- SimpleJWT lifetimes (the identity collaborator for API clients)
- CORS for FE ↔ BE requests
- Static handling via WhiteNoise
- Swagger (drf-yasg) configured to use Bearer tokens in the Authorize dialog
- ANNOUNCEMENTS: targeting / recency options read by announcements.conf
- LOGGING: console handler + an "announcements" logger

How environment variables drive behavior (deployment-safe)
===============================================================================
DJANGO_DEBUG                  -> Enables dev mode when true. Defaults to True locally.
DJANGO_SECRET_KEY             -> Required when DJANGO_DEBUG=False (production).
DJANGO_ALLOWED_HOSTS          -> Comma-separated list of allowed hostnames in prod.
CORS_ALLOW_ALL_ORIGINS        -> Dev toggle to allow any origin (default True in dev).
CORS_ALLOWED_ORIGINS          -> Comma-separated list of exact origins (prod).
DATABASE_URL                  -> Postgres/MySQL URL; SQLite when unset.
ANNOUNCEMENTS_USER_PREDICATES -> Comma-separated user predicates usable in
                                 limit_to_users conditions (default: is_free).
ANNOUNCEMENTS_RECENT_DAYS     -> Default look-back for /recent/ (default: 14).
ANNOUNCEMENTS_LOG_LEVEL       -> Level of the "announcements" logger (default: INFO).

Why some ordering matters
===============================================================================
- We compute DEBUG first so SECRET_KEY can enforce “prod requires a key.”
- SECRET_KEY only falls back to a dev key when DEBUG=True.
"""

from pathlib import Path
from datetime import timedelta
from urllib.parse import urlparse
import os


# ---------------------------
# Helpers for env parsing
# ---------------------------
def _get_bool(env_key: str, default: bool = False) -> bool:
    """Parse booleans from env like '1', 'true', 'yes'."""
    raw = os.environ.get(env_key, str(default))
    return str(raw).strip().lower() in {"1", "true", "yes", "on"}

def _get_list(env_key: str, default=None):
    """Parse comma-separated lists from env (e.g., 'a.com,b.com')."""
    if default is None:
        default = []
    raw = os.environ.get(env_key)
    if not raw:
        return default
    return [item.strip() for item in raw.split(",") if item.strip()]

def _origin_from(url: str) -> str:
    """Turn a full URL into an origin string (scheme://host[:port])."""
    p = urlparse(url or "")
    if not p.scheme or not p.hostname:
        return ""
    return f"{p.scheme}://{p.hostname}" + (f":{p.port}" if p.port else "")


BASE_DIR = Path(__file__).resolve().parent.parent

# Reads DJANGO_DEBUG from env. Defaults to True for dev.
DEBUG = _get_bool("DJANGO_DEBUG", True)


# --- Frontend URL & CORS/CSRF (dev-friendly defaults) ---
FRONTEND_URL = os.environ.get("FRONTEND_URL", "http://localhost:5173/")

# In prod set CORS_ALLOW_ALL_ORIGINS=False and specify CORS_ALLOWED_ORIGINS explicitly.
CORS_ALLOW_ALL_ORIGINS = _get_bool("CORS_ALLOW_ALL_ORIGINS", DEBUG)

CORS_ALLOWED_ORIGINS = _get_list("CORS_ALLOWED_ORIGINS", [])
if not CORS_ALLOWED_ORIGINS and FRONTEND_URL:
    derived = _origin_from(FRONTEND_URL)
    if derived:
        CORS_ALLOWED_ORIGINS = [derived]

CSRF_TRUSTED_ORIGINS = _get_list("CSRF_TRUSTED_ORIGINS", [])
if not CSRF_TRUSTED_ORIGINS and FRONTEND_URL:
    derived = _origin_from(FRONTEND_URL)
    if derived:
        CSRF_TRUSTED_ORIGINS = [derived]


# SECRET_KEY with safe production enforcement
#    - In dev (DEBUG=True): fallback to a dev key if none provided
#    - In prod (DEBUG=False): require DJANGO_SECRET_KEY
SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY") or (
    "django-insecure-q8w!v2m#k0r7t%x1z^b4n6c9e3s5d@h2j8l0p4a7u1y6i3o9" if DEBUG else None
)
if not SECRET_KEY:
    raise RuntimeError("DJANGO_SECRET_KEY must be set when DJANGO_DEBUG=False")


# Reads DJANGO_ALLOWED_HOSTS as a comma-separated list. Defaults to:
#   - [] in dev (DEBUG=True)
#   - ["127.0.0.1"] in prod (DEBUG=False)
ALLOWED_HOSTS = _get_list("DJANGO_ALLOWED_HOSTS", [] if DEBUG else ["127.0.0.1"])


INSTALLED_APPS = [
    # Django core
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    # Third-party
    'rest_framework',
    'corsheaders',
    'django_filters',                             # query-param validation for /recent/
    'drf_yasg',                                   # Swagger/OpenAPI docs

    # Local apps
    'users',
    'announcements',
]

AUTH_USER_MODEL = "users.User"

SWAGGER_SETTINGS = {
    "USE_SESSION_AUTH": False,  # hide Django session login in the docs
    "SECURITY_DEFINITIONS": {
        "Bearer": {
            "type": "apiKey",
            "name": "Authorization",
            "in": "header",
            "description": "Paste: Bearer <access-token>",
        }
    },
}

MIDDLEWARE = [
    # CORS should be as high as possible
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.common.CommonMiddleware',

    'django.middleware.security.SecurityMiddleware',
    'whitenoise.middleware.WhiteNoiseMiddleware',  # Serves static in prod
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": (
        "rest_framework_simplejwt.authentication.JWTAuthentication",
        "rest_framework.authentication.SessionAuthentication",
    ),
    "DEFAULT_PERMISSION_CLASSES": (
        "rest_framework.permissions.IsAuthenticated",
    ),
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
        "rest_framework.parsers.FormParser",
        "rest_framework.parsers.MultiPartParser",
    ],
}

# JWT lifetimes (dev-friendly defaults)
SIMPLE_JWT = {
    "ACCESS_TOKEN_LIFETIME": timedelta(hours=6),
    "REFRESH_TOKEN_LIFETIME": timedelta(days=7),
}

# --- Announcements targeting ---------------------------------------------------
# USER_FIELDS=None exposes every concrete user field except the password hash.
# USER_PREDICATES are extra zero-arg methods/properties conditions may reference.
ANNOUNCEMENTS = {
    "USER_FIELDS": None,
    "USER_PREDICATES": _get_list("ANNOUNCEMENTS_USER_PREDICATES", ["is_free"]),
    "RECENT_WINDOW": timedelta(days=int(os.environ.get("ANNOUNCEMENTS_RECENT_DAYS", "14"))),
    "CURRENT_USER_ATTRIBUTE": "user",
}

ROOT_URLCONF = 'noticeboard_backend.urls'
WSGI_APPLICATION = 'noticeboard_backend.wsgi.application'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
                'announcements.context_processors.current_announcement',
            ],
        },
    },
]


# --- Database (DATABASE_URL when set; SQLite otherwise) ---
import dj_database_url

DB_URL = os.environ.get("DATABASE_URL", "").strip()
IS_POSTGRES = DB_URL.startswith("postgres://") or DB_URL.startswith("postgresql://")

if DB_URL:
    DATABASES = {
        "default": dj_database_url.parse(
            DB_URL,
            conn_max_age=600,
            ssl_require=IS_POSTGRES,  # only apply SSL flag for Postgres URLs
        )
    }
else:
    # Default to SQLite for local dev/CI
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",
        }
    }


AUTHENTICATION_BACKENDS = [
    "django.contrib.auth.backends.ModelBackend",
]

AUTH_PASSWORD_VALIDATORS = [
    {'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator'},
    {'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator'},
    {'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator'},
    {'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator'},
]

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

# Static
STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / "staticfiles"

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "django.request": {  # 500s, 404s with exceptions
            "handlers": ["console"],
            "level": "ERROR",
            "propagate": True,
        },
        "django": {
            "handlers": ["console"],
            "level": "INFO",
        },
        "announcements": {
            "handlers": ["console"],
            "level": os.environ.get("ANNOUNCEMENTS_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
    },
}
