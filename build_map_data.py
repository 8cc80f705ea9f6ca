"""
Join covidtracking.com daily state data and state populations onto a states
GeoJSON, writing the feature collection the dashboard loads.

Usage:
    python build_map_data.py -g us-states.geojson -p state-populations.csv [-d states_daily.csv] [-o assets/states_with_data.geojson]
"""
import logging
import argparse

import config
import data_helper


def main(argv=None):
    ap = argparse.ArgumentParser(description='Build the state feature collection for the map.')
    ap.add_argument('-g', '--geojson', type=str, required=True)    # states FeatureCollection with NAME property
    ap.add_argument('-p', '--populations', type=str, required=True) # csv with NAME, population
    ap.add_argument('-d', '--daily', type=str, default=None)        # daily csv, downloaded if omitted
    ap.add_argument('-o', '--output', type=str, default=config.FEATURES_FILE)
    arg = ap.parse_args(argv)

    logging.basicConfig(format=config.LOG_FORMAT, level=logging.INFO)

    feature_collection = data_helper.read_geojson(arg.geojson)

    populations = data_helper.load_populations(arg.populations)
    if arg.daily is None: daily_df = data_helper.fetch_daily_data()
    else: daily_df = data_helper.load_daily_data(arg.daily)

    feature_collection = data_helper.join_daily_data(feature_collection, daily_df, populations)
    data_helper.write_feature_collection(feature_collection, arg.output)
    return feature_collection


if __name__ == '__main__':
    main()
