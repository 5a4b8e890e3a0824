from enrollment_manager.settings.base import *

DEBUG = True

ALLOWED_HOSTS = ['*']

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.mysql',
        'NAME': os.environ.get('DB_NAME', 'enrollment_manager'),
        'USER': os.environ.get('DB_USER', 'root'),
        'PASSWORD': os.environ.get('DB_PASSWORD', ''),
        'HOST': os.environ.get('DB_HOST', 'enrollment_manager.mysql80'),
        'PORT': os.environ.get('DB_PORT', 3306),
        'ATOMIC_REQUESTS': False,
        'CONN_MAX_AGE': 60,
        'OPTIONS': {
            'isolation_level': 'read committed',
        },
    }
}

LOGGING = get_logger_config(debug=DEBUG, dev_env=True, format_string=LOGGING_FORMAT_STRING)

# BEGIN CELERY
CELERY_WORKER_HIJACK_ROOT_LOGGER = True
CELERY_TASK_ALWAYS_EAGER = (
    os.environ.get("CELERY_ALWAYS_EAGER", "false").lower() == "true"
)
CELERY_BROKER_URL = os.environ.get('CELERY_BROKER_URL', 'redis://enrollment_manager.redis:6379/0')
# END CELERY

# CSRF CONFIG
CSRF_TRUSTED_ORIGINS = [
    'http://localhost:3000',  # admin frontend
]
# END CSRF CONFIG
