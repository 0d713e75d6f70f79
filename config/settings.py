import logging
import os

from dotenv import load_dotenv

load_dotenv()

PROJECT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

ROOT_DIR = os.path.dirname(PROJECT_DIR)

APPS_DIR = os.path.join(PROJECT_DIR, 'hiretrack')

BASE_DIR = os.path.join(PROJECT_DIR, 'config')

DEBUG = eval(os.environ.get('DEBUG', 'False'))

SECRET_KEY = os.environ.get('SECRET_KEY', 'Xk2m9Qw4hTr8LpVb7NcZ1fGsYd3eJu6A')

ENVIRONMENT = os.environ.get('ENVIRONMENT', 'development')

ALLOWED_HOSTS = eval(os.environ.get('ALLOWED_HOSTS', "['localhost', '127.0.0.1']"))

DJANGO_APPS = (
    'django.contrib.auth',
    'django.contrib.contenttypes',
)

PROJECT_APPS = (
    'hiretrack.common',
    'hiretrack.organization',
    'hiretrack.users',
    'hiretrack.recruitment',
)

INSTALLED_APPS = DJANGO_APPS + PROJECT_APPS

AUTH_USER_MODEL = 'users.User'

# Internationalization
# https://docs.djangoproject.com/en/5.1/topics/i18n/

TIME_ZONE = os.environ.get('TIME_ZONE', 'UTC')

LANGUAGE_CODE = 'en'

USE_I18N = True

USE_TZ = True

if os.environ.get('DATABASE_NAME'):
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.postgresql',
            'NAME': os.environ.get('DATABASE_NAME'),
            'USER': os.environ.get('DATABASE_USER', None),
            'PASSWORD': os.environ.get('DATABASE_PASSWORD', None),
            'HOST': os.environ.get('DATABASE_HOST', 'localhost'),
            'PORT': os.environ.get('DATABASE_PORT', '5432'),
        },
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': os.environ.get(
                'SQLITE_PATH', os.path.join(PROJECT_DIR, 'hiretrack.sqlite3')
            ),
        },
    }

if os.environ.get('DATABASE_TEST_TEMPLATE'):
    DATABASES['default']['TEST'] = {
        'TEMPLATE': os.environ.get('DATABASE_TEST_TEMPLATE')}

DEFAULT_AUTO_FIELD = 'django.db.models.AutoField'


SHOW_LOGS_ON_CONSOLE = eval(os.environ.get('SHOW_LOGS_ON_CONSOLE', 'False'))

# LOGGING FORMATS AND CONFIGURATIONS
LOG_DIRECTORY = os.environ.get('LOG_DIRECTORY', os.path.join(
    PROJECT_DIR if ENVIRONMENT == 'development' else ROOT_DIR,
    'logs'
))
if not os.path.exists(LOG_DIRECTORY):
    os.makedirs(LOG_DIRECTORY, exist_ok=True)

extend_logging = dict()
extend_handlers = dict()


class RequireConsoleLog(logging.Filter):
    def filter(self, record):
        if 'site-packages' in record.pathname:
            return 'django' in record.pathname
        return SHOW_LOGS_ON_CONSOLE


for module in PROJECT_APPS:
    extend_logging.update({
        module: {
            'handlers': [module, 'console'],
            'propagate': False,
        }
    })
    extend_handlers.update({
        module: {
            'level': 'DEBUG',
            'class': 'logging.handlers.TimedRotatingFileHandler',
            'formatter': 'verbose',
            'filename': os.path.join(
                LOG_DIRECTORY, module.split('.')[1] + '.log'
            ),
            'when': 'midnight',
        }
    })

LOGGING = {
    'version': 1,
    'disable_existing_loggers': True,
    'formatters': {
        'verbose': {
            'format': '\n%(levelname)s %(asctime)s %(module)s %(process)d %(thread)d %(message)s',
        },
        'simple': {
            'format': '{levelname} {message} -->from [{module}]',
            'style': '{'
        },
    },
    'filters': {
        'require_debug_true': {
            '()': 'django.utils.log.RequireDebugTrue',
        },
        'require_console_log': {
            '()': RequireConsoleLog
        }
    },
    'handlers': {
        'default': {
            'level': 'DEBUG',
            'class': 'logging.handlers.TimedRotatingFileHandler',
            'filename': os.path.join(LOG_DIRECTORY, 'debug.log'),
            'formatter': 'verbose',
            'when': 'midnight',
        },
        'console': {
            'level': 'DEBUG',
            'filters': ['require_debug_true', 'require_console_log'],
            'class': 'logging.StreamHandler',
            'formatter': 'simple'
        },
        'database': {
            'level': 'DEBUG',
            'class': 'logging.FileHandler',
            'filename': os.path.join(LOG_DIRECTORY, 'database.log'),
            'formatter': 'verbose',
        },
        **extend_handlers
    },
    'loggers': {
        '': {
            'handlers': ['default', 'console'],
            'level': 'DEBUG',
            'propagate': False,
        },
        'django.db.backends': {
            'handlers': ['database'],
            'propagate': False,
        },
        **extend_logging
    },
}
