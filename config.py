"""
Paths and server settings. Values can be overridden through environment
variables of the same name prefixed with `COVID_MAP_`.
"""
import os


def _env(name, default):
    return os.environ.get(f'COVID_MAP_{name}', default)


# Data
ASSETS_DIR = _env('ASSETS_DIR', 'assets')
DATA_DIR = _env('DATA_DIR', os.path.join('data', 'covidtracking'))
FEATURES_FILE = _env('FEATURES_FILE', os.path.join(ASSETS_DIR, 'states_with_data.geojson'))
DAILY_DATA_URL = _env('DAILY_DATA_URL', 'https://api.covidtracking.com/v1/states/daily.csv')
DAILY_DATA_COLUMNS = ['date', 'state', 'positive', 'death', 'totalTestResults']
REQUEST_TIMEOUT = float(_env('REQUEST_TIMEOUT', 30))

# Server
HOST = _env('HOST', '0.0.0.0')
PORT = int(_env('PORT', 8000))
DEBUG = _env('DEBUG', 'false').lower() in ('1', 'true', 'yes')

# Logging
LOG_FORMAT = '%(levelname)s:%(message)s'
LOG_LEVEL = _env('LOG_LEVEL', 'WARNING').upper()
