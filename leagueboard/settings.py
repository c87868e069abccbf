"""
Django settings for the leagueboard project.

Only the standings app is installed; persistence and the web layer live in
the service that embeds it.
"""

import os

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

SECRET_KEY = os.environ.get('LEAGUEBOARD_SECRET_KEY', 'leagueboard-insecure-dev-key')

DEBUG = os.environ.get('LEAGUEBOARD_DEBUG', '1') == '1'

ALLOWED_HOSTS = []

INSTALLED_APPS = [
    'leagueboard.standings_core',
]

MIDDLEWARE = []

DATABASES = {}

USE_TZ = True

TIME_ZONE = 'UTC'

# Scoring system for leagues without their own. Leave unset to use the
# built-in "Standard Scoring".
# STANDINGS_DEFAULT_SCORING_SYSTEM = {
#     'name': 'Standard Scoring',
#     'formulas': [
#         {'multiplier': 1, 'point_metric': 'EVENT_ATTENDANCE', 'order': 1},
#         {'multiplier': 3, 'point_metric': 'FIRST_PLACE', 'order': 2},
#         {'multiplier': 2, 'point_metric': 'SECOND_PLACE', 'order': 3},
#         {'multiplier': 1, 'point_metric': 'THIRD_PLACE', 'order': 4},
#     ],
#     'tie_breakers': [
#         {'type': 'LEAGUE_POINTS', 'order': 1},
#         {'type': 'MATCH_POINTS', 'order': 2},
#     ],
# }

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '%(asctime)s %(levelname)s %(name)s %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'loggers': {
        'leagueboard': {
            'handlers': ['console'],
            'level': os.environ.get('LEAGUEBOARD_LOG_LEVEL', 'INFO'),
        },
    },
}
