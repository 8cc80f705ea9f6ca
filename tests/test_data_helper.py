"""
Tests for loading and building the state feature collection.
"""
import io
import json

import pandas as pd
import pytest

import data_helper

CODE_TO_NAME = {'AL': 'Alpha', 'BE': 'Beta'}


# =============================================================================
# Centroids
# =============================================================================

class TestCentroid:

    def test_polygon(self, alpha):
        assert data_helper.compute_centroid(alpha['geometry']) == pytest.approx([-99, 39])

    def test_multipolygon_uses_largest(self):
        geometry = {
            'type': 'MultiPolygon',
            'coordinates': [
                [[[0, 0], [1, 0], [1, 1], [0, 1], [0, 0]]],
                [[[10, 10], [14, 10], [14, 14], [10, 14], [10, 10]]],
            ],
        }
        assert data_helper.compute_centroid(geometry) == pytest.approx([12, 12])

    def test_empty(self):
        assert data_helper.compute_centroid(None) is None
        assert data_helper.compute_centroid({'type': 'Polygon', 'coordinates': []}) is None


# =============================================================================
# Loading
# =============================================================================

class TestLoadFeatureCollection:

    def test_fills_missing_centroids(self, tmp_path, feature_collection):
        for feature in feature_collection['features']:
            feature['properties'].pop('centroidCoordinates')
        del feature_collection['features'][1]['properties']['dailyData']
        path = tmp_path / 'states.geojson'
        path.write_text(json.dumps(feature_collection))

        loaded = data_helper.load_feature_collection(str(path))
        alpha, beta, _ = loaded['features']
        assert alpha['properties']['centroidCoordinates'] == pytest.approx([-99, 39])
        assert beta['properties']['dailyData'] == {}

    def test_rejects_non_feature_collection(self, tmp_path):
        path = tmp_path / 'feature.geojson'
        path.write_text(json.dumps({'type': 'Feature', 'geometry': None, 'properties': {}}))
        with pytest.raises(ValueError):
            data_helper.load_feature_collection(str(path))

    def test_read_geojson(self, tmp_path, feature_collection):
        path = tmp_path / 'states.geojson'
        path.write_text(json.dumps(feature_collection))
        assert data_helper.read_geojson(str(path)) == feature_collection

        path.write_text(json.dumps([feature_collection]))
        with pytest.raises(ValueError):
            data_helper.read_geojson(str(path))

    def test_list_dates(self, feature_collection):
        assert data_helper.list_dates(feature_collection) == ['20200401', '20200402', '20200403']

    def test_write(self, tmp_path, feature_collection):
        path = tmp_path / 'out' / 'states.geojson'
        data_helper.write_feature_collection(feature_collection, str(path))
        assert json.loads(path.read_text()) == feature_collection


class TestDailyData:

    def test_load(self, daily_csv):
        df = data_helper.load_daily_data(io.StringIO(daily_csv))
        assert list(df.columns) == ['date', 'state', 'positive', 'death', 'totalTestResults']
        assert df['date'].iloc[0] == '20200402'
        assert pd.isna(df['death'].iloc[0])
        assert df['totalTestResults'].iloc[1] == 10000

    def test_missing_columns(self):
        with pytest.raises(ValueError):
            data_helper.load_daily_data(io.StringIO('date,state,positive\n20200401,AL,1\n'))

    def test_fetch_uses_cache(self, tmp_path, daily_csv, monkeypatch):
        (tmp_path / 'states_daily.csv').write_text(daily_csv)

        def _fail(*args, **kwargs):
            raise AssertionError('should not download')
        monkeypatch.setattr(data_helper.requests, 'get', _fail)

        df = data_helper.fetch_daily_data(url='http://example.invalid', data_dir=str(tmp_path))
        assert len(df) == 4

    def test_fetch_downloads_and_caches(self, tmp_path, daily_csv, monkeypatch):
        class _Response:
            text = daily_csv
            def raise_for_status(self):
                pass
        calls = []
        def _get(url, timeout=None):
            calls.append(url)
            return _Response()
        monkeypatch.setattr(data_helper.requests, 'get', _get)

        data_dir = tmp_path / 'cache'
        df = data_helper.fetch_daily_data(url='http://example.invalid/daily.csv', data_dir=str(data_dir))
        assert calls == ['http://example.invalid/daily.csv']
        assert len(df) == 4
        assert (data_dir / 'states_daily.csv').read_text() == daily_csv


# =============================================================================
# Joining
# =============================================================================

class TestJoin:

    @pytest.fixture
    def bare_collection(self, feature_collection):
        for feature in feature_collection['features']:
            feature['properties'] = {'NAME': feature['properties']['NAME']}
        return feature_collection

    def test_load_populations(self, tmp_path):
        path = tmp_path / 'populations.csv'
        path.write_text('NAME,population\nAlpha,2000000\nBeta,1000000\n')
        assert data_helper.load_populations(str(path)) == {'Alpha': 2000000, 'Beta': 1000000}

    def test_load_populations_bad_columns(self, tmp_path):
        path = tmp_path / 'populations.csv'
        path.write_text('state,pop\nAlpha,2000000\n')
        with pytest.raises(ValueError):
            data_helper.load_populations(str(path))

    def test_join(self, bare_collection, daily_csv):
        daily_df = data_helper.load_daily_data(io.StringIO(daily_csv))
        populations = {'Alpha': 2000000, 'Beta': 1000000}
        joined = data_helper.join_daily_data(bare_collection, daily_df, populations, code_to_name=CODE_TO_NAME)

        alpha, beta, gamma = [feature['properties'] for feature in joined['features']]
        assert alpha['population'] == 2000000
        assert alpha['dailyData'] == {
            '20200401': {'positive': 1000, 'death': 20, 'totalTestResults': 10000},
            '20200402': {'positive': 1500, 'totalTestResults': 16000},
        }
        assert beta['dailyData'] == {'20200401': {'positive': 300, 'death': 1, 'totalTestResults': 2500}}
        assert alpha['centroidCoordinates'] == pytest.approx([-99, 39])
        # no data and no population
        assert gamma['dailyData'] == {}
        assert gamma['population'] == 0

    def test_join_does_not_mutate_input(self, bare_collection, daily_csv):
        daily_df = data_helper.load_daily_data(io.StringIO(daily_csv))
        data_helper.join_daily_data(bare_collection, daily_df, {}, code_to_name=CODE_TO_NAME)
        assert bare_collection['features'][0]['properties'] == {'NAME': 'Alpha'}
