"""
Loading and building the state feature collection consumed by the dashboard.

Each feature carries, in its properties:
* NAME: state/territory name
* population: fixed population figure
* dailyData: {'YYYYMMDD': {'positive': int, 'death': int, 'totalTestResults': int}}
* centroidCoordinates: [lon, lat], or None
"""
import os
import io
import json
import logging
import requests
import numpy as np
import pandas as pd

from tqdm import tqdm

import config
import constants as C

logger = logging.getLogger(__name__)


def _polygons(geometry):
    if geometry is None: return []
    if geometry['type'] == 'Polygon': return [geometry['coordinates']]
    elif geometry['type'] == 'MultiPolygon': return geometry['coordinates']
    return []

def _ring_area_centroid(ring):
    # Shoelace formula over the exterior ring
    xy = np.asarray(ring, dtype=float)[:, :2]
    x, y = xy[:, 0], xy[:, 1]
    x1, y1 = np.roll(x, -1), np.roll(y, -1)
    cross = x * y1 - x1 * y
    area = cross.sum() / 2
    if area == 0: return 0.0, (x.mean(), y.mean())
    cx = ((x + x1) * cross).sum() / (6 * area)
    cy = ((y + y1) * cross).sum() / (6 * area)
    return abs(area), (cx, cy)

def compute_centroid(geometry):
    """ Planar centroid [lon, lat] of the largest polygon in the geometry. """
    rings = [polygon[0] for polygon in _polygons(geometry) if len(polygon) > 0 and len(polygon[0]) > 0]
    if len(rings) == 0: return None
    area, (cx, cy) = max((_ring_area_centroid(ring) for ring in rings), key=lambda x: x[0])
    return [float(cx), float(cy)]


def read_geojson(path):
    with open(path, 'r') as f:
        feature_collection = json.load(f)

    if not isinstance(feature_collection, dict) or feature_collection.get('type') != 'FeatureCollection':
        raise ValueError(f'{path} is not a GeoJSON FeatureCollection')
    return feature_collection


def load_feature_collection(path=config.FEATURES_FILE):
    logger.info('Loading feature collection from %s...', path)
    feature_collection = read_geojson(path)

    for feature in feature_collection['features']:
        properties = feature.setdefault('properties', {})
        properties.setdefault('dailyData', {})
        if properties.get('centroidCoordinates') is None:
            properties['centroidCoordinates'] = compute_centroid(feature.get('geometry'))

    logger.info('Loaded %d features', len(feature_collection['features']))
    return feature_collection


def write_feature_collection(feature_collection, path):
    dirname = os.path.dirname(path)
    if dirname: os.makedirs(dirname, exist_ok=True)
    with open(path, 'w') as f:
        json.dump(feature_collection, f)
    logger.info('Wrote %d features to %s', len(feature_collection['features']), path)


def list_dates(feature_collection):
    dates = set()
    for feature in feature_collection['features']:
        dates.update(feature['properties'].get('dailyData', {}).keys())
    return sorted(dates)


## Functions for building the collection

def load_daily_data(path_or_buffer):
    """ Read covidtracking.com daily state data (csv).

    Returns:
        pandas.DataFrame: columns date (str, YYYYMMDD), state, positive, death, totalTestResults.
    """
    df = pd.read_csv(path_or_buffer, dtype={'date': str, 'state': str})
    missing = [col for col in config.DAILY_DATA_COLUMNS if col not in df.columns]
    if len(missing) > 0:
        raise ValueError(f'Daily data is missing columns: {missing}')

    df = df.loc[:, config.DAILY_DATA_COLUMNS].copy()
    df['date'] = df['date'].str.replace('-', '', regex=False)
    for field in C.FIELDS:
        df[field] = pd.to_numeric(df[field], errors='coerce').astype('Int64')
    return df

def fetch_daily_data(url=config.DAILY_DATA_URL, data_dir=config.DATA_DIR):
    daily_csv = os.path.join(data_dir, 'states_daily.csv')

    if os.path.isfile(daily_csv):
        logger.info('Using cached daily data %s', daily_csv)
        return load_daily_data(daily_csv)

    logger.info('Downloading daily data from %s...', url)
    page = requests.get(url, timeout=config.REQUEST_TIMEOUT)
    page.raise_for_status()

    os.makedirs(data_dir, exist_ok=True)
    with open(daily_csv, 'w') as f:
        f.write(page.text)
    return load_daily_data(io.StringIO(page.text))


def load_populations(path):
    """ Read a csv with NAME and population columns into {NAME: population}. """
    population_df = pd.read_csv(path)
    if not {'NAME', 'population'}.issubset(population_df.columns):
        raise ValueError(f'{path} needs NAME and population columns')
    return dict(zip(population_df['NAME'], population_df['population'].astype(int)))


def _daily_records(state_df):
    daily_data = {}
    for _, row in state_df.iterrows():
        record = {field: int(row[field]) for field in C.FIELDS if not pd.isna(row[field])}
        daily_data[row['date']] = record
    return daily_data

def join_daily_data(feature_collection, daily_df, populations, code_to_name=C.STATE_CODE_TO_NAME):
    """ Attach dailyData, population and centroid to every feature (matched on NAME). """
    daily_df = daily_df.assign(NAME=daily_df['state'].map(code_to_name))
    unmatched = daily_df.loc[daily_df['NAME'].isna(), 'state'].unique()
    if len(unmatched) > 0:
        logger.warning('No state name for codes: %s', ', '.join(map(str, unmatched)))
    name_to_df = dict(tuple(daily_df.groupby('NAME')))

    features = []
    for feature in tqdm(feature_collection['features']):
        properties = dict(feature.get('properties', {}))
        name = properties.get('NAME')
        if name not in populations:
            logger.warning('No population for %s', name)
        properties['population'] = int(populations.get(name, 0))
        properties['dailyData'] = _daily_records(name_to_df[name]) if name in name_to_df else {}
        properties['centroidCoordinates'] = compute_centroid(feature.get('geometry'))
        features.append(dict(feature, properties=properties))

    return dict(feature_collection, features=features)
