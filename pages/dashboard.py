"""
Map of per-state tests, positive tests and deaths for a selected date.

Choropleth view shades states by the per-million value of the selected metric;
bubble view sizes test/positive bubbles by a square root scale and shows a
bubble size legend. Hovering a state shows a tooltip with totals and per capita
values.
"""
import dash
from dash import html, dcc, callback, Input, Output
import dash_bootstrap_components as dbc

import config
import constants as C
import data_helper
from scale_helper import parse_date, format_date
from dashboard_utils import plot_map, plot_bubble_legend, max_value, radius_scale, render_tooltip


dash.register_page(__name__, path='/dashboard', name='Map', title='Map', id='dashboard-link')

# ---------------------------------------------------------------------------------------------------------------

feature_collection = data_helper.load_feature_collection(config.FEATURES_FILE)
dates = data_helper.list_dates(feature_collection)

field_menu_options = [
    {"label": C.FIELD_TO_LABEL[field], "value": field}
    for field in C.FIELDS
]

def _date_marks(dates):
    # Label the first day of each month
    marks = {}
    for i, date in enumerate(dates):
        if date.endswith('01') or i == len(dates)-1:
            marks[i] = format_date(parse_date(date))
    return marks

# ---------------------------------------------------------------------------------------------------------------
# Controls

controls = dbc.Row([
    dbc.Col([
        dbc.Label("Date"),
        dcc.Slider(
            id="date-slider",
            min=0,
            max=max(len(dates)-1, 0),
            step=1,
            value=max(len(dates)-1, 0),
            marks=_date_marks(dates),
            included=False,
        ),
    ], width=12),
    dbc.Col([
        dbc.Label("Metric"),
        dbc.RadioItems(
            id="field-radio",
            options=field_menu_options,
            value=C.DEFAULT_FIELD,
            inline=True,
        ),
    ], width="auto"),
    dbc.Col([
        dbc.Switch(
            id="choropleth-switch",
            label="Choropleth (per million)",
            value=True,
        ),
    ], width="auto", align="end"),
])

# ---------------------------------------------------------------------------------------------------------------
# Map

geographic_map_content = html.Div([
    html.Div(
        dcc.Graph(id='bubble-legend', config={'displayModeBar': False, 'staticPlot': True}),
        id='bubble-legend-container',
    ),
    dcc.Graph(id='map', config={'displayModeBar': False, 'scrollZoom': False}, clear_on_unhover=True),
    dcc.Tooltip(id='map-tooltip', direction='right'),
], className='map-container')

layout = dbc.Container([
    dbc.Row([
        dbc.Col([
            html.H3(['Map']),
            html.P(id='current-date', className='lead'),
            controls,
            geographic_map_content,
            html.P('* per million people', className='text-muted small'),
        ], width=12),
    ]),
])

# ---------------------------------------------------------------------------------------------------------------

def _current_date(date_ix):
    if len(dates) == 0: return None
    return dates[min(int(date_ix or 0), len(dates)-1)]

@callback(
    [Output("map", "figure"),
     Output("bubble-legend", "figure"),
     Output("bubble-legend-container", "style"),
     Output("current-date", "children")],
    [Input("date-slider", "value"),
     Input("field-radio", "value"),
     Input("choropleth-switch", "value")],
)
def update_map(date_ix, field, use_choropleth):
    date = _current_date(date_ix)
    fig = plot_map(feature_collection, date, field, use_choropleth)

    max_tests = max_value(feature_collection, date, 'totalTestResults')
    legend = plot_bubble_legend(max_tests, radius_scale(max_tests))
    legend_style = {'display': 'none'} if use_choropleth else {}

    return fig, legend, legend_style, format_date(parse_date(date))

@callback(
    [Output("map-tooltip", "show"),
     Output("map-tooltip", "bbox"),
     Output("map-tooltip", "children")],
    [Input("map", "hoverData"),
     Input("date-slider", "value")],
)
def display_hover(hover_data, date_ix):
    return render_tooltip(hover_data, feature_collection, _current_date(date_ix))
