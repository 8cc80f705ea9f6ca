import copy
import pytest


def _square(lon0, lat0, size):
    return {
        'type': 'Polygon',
        'coordinates': [[
            [lon0, lat0], [lon0 + size, lat0], [lon0 + size, lat0 + size],
            [lon0, lat0 + size], [lon0, lat0],
        ]],
    }


def _feature(name, geometry, population, daily_data, centroid):
    return {
        'type': 'Feature',
        'geometry': geometry,
        'properties': {
            'NAME': name,
            'population': population,
            'dailyData': daily_data,
            'centroidCoordinates': centroid,
        },
    }


FEATURE_COLLECTION = {
    'type': 'FeatureCollection',
    'features': [
        _feature('Alpha', _square(-100, 38, 2), 2000000, {
            '20200401': {'positive': 1000, 'death': 20, 'totalTestResults': 10000},
            '20200402': {'positive': 1500, 'totalTestResults': 16000},
        }, [-99, 39]),
        _feature('Beta', _square(-90, 35, 2), 1000000, {
            '20200401': {'positive': 300, 'death': 1, 'totalTestResults': 2500},
        }, [-89, 36]),
        # outside the albers usa render area
        _feature('Gamma', _square(-67, 18, 1), 500000, {
            '20200403': {'positive': 10, 'death': 0, 'totalTestResults': 100},
        }, [-66.5, 18.5]),
    ],
}


@pytest.fixture
def feature_collection():
    return copy.deepcopy(FEATURE_COLLECTION)


@pytest.fixture
def alpha(feature_collection):
    return feature_collection['features'][0]


@pytest.fixture
def daily_csv():
    return (
        'date,state,positive,negative,death,totalTestResults\n'
        '20200402,AL,1500,14500,,16000\n'
        '20200401,AL,1000,9000,20,10000\n'
        '20200401,BE,300,2200,1,2500\n'
        '20200401,ZZ,5,5,0,10\n'
    )
