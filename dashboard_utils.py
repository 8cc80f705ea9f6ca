import logging
import numpy as np
import plotly.graph_objects as go
from dash import html, no_update
from plotly.colors import hex_to_rgb

import constants as C
from scale_helper import scale_threshold, scale_sqrt, round_significant, format_number, \
                         parse_date, format_date, discrete_colorscale

logger = logging.getLogger(__name__)

field_to_color_scale = {
    field: scale_threshold(C.COLOR_LIMITS[field], C.FIELD_TO_SCHEME[field])
    for field in C.FIELDS
}

#------------------------------------------------------------------------
# Values

def get_value(feature, date, field, normalized=False):
    """ Metric value of a feature on a date; 0 when the date or field is missing.

    Args:
        feature (dict): GeoJSON feature with dailyData and population properties.
        date (str): YYYYMMDD key into dailyData.
        field (str): one of constants.FIELDS.
        normalized (bool, optional): divide by population in millions. A population of
            0 gives inf/nan rather than raising.
    """
    properties = feature['properties']
    value = (properties.get('dailyData', {}).get(date) or {}).get(field) or 0
    if not normalized:
        return value
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(value) / (np.float64(properties['population']) / C.NORMALIZATION_POPULATION))

def max_value(feature_collection, date, field='totalTestResults'):
    values = [get_value(feature, date, field) for feature in feature_collection['features']]
    if len(values) == 0: return None
    return max(values)

def radius_scale(max_value):
    if not max_value: return None
    return scale_sqrt((0, max_value), (0, C.MAX_RADIUS))

#------------------------------------------------------------------------
# Colors

def get_color(field, value):
    if field not in field_to_color_scale:
        raise ValueError(f'Unknown field: {field}')
    return field_to_color_scale[field](value)

def state_fill(feature, date, field, use_choropleth):
    if not use_choropleth: return 'white'
    return get_color(field, get_value(feature, date, field, normalized=True))

def _rgba(hex_color, opacity):
    r, g, b = hex_to_rgb(hex_color)
    return f'rgba({r}, {g}, {b}, {opacity})'

#------------------------------------------------------------------------
# Geometry

def in_render_area(coordinates):
    if coordinates is None or len(coordinates) < 2: return False
    lon, lat = coordinates[:2]
    if lon is None or lat is None: return False
    for (lon0, lat0), (lon1, lat1) in C.ALBERS_USA_EXTENTS.values():
        if lon0 <= lon <= lon1 and lat0 <= lat <= lat1: return True
    return False

def geometry_collection(feature_collection):
    """ NAME and geometry only, so figures do not carry the time series. """
    return dict(
        type='FeatureCollection',
        features=[
            dict(type='Feature', geometry=feature.get('geometry'),
                 properties=dict(NAME=feature['properties']['NAME']))
            for feature in feature_collection['features']
        ],
    )

def renderable_features(feature_collection):
    return [feature for feature in feature_collection['features']
            if in_render_area(feature['properties'].get('centroidCoordinates'))]

def legend_entries(max_value, r):
    """ Three legend bubbles at 10%, 50% and 100% of max_value.

    Returns:
        list: dicts with the rounded value, radius, and circle/line/label positions on
            the legend canvas (y grows downward).
    """
    if r is None: return []
    entries = []
    for fraction in C.LEGEND_FRACTIONS:
        value = int(round_significant(max_value * fraction, 1))
        radius = r(value)
        top = C.LEGEND_BASE_Y - 2 * radius
        entries.append(dict(
            value=value,
            label=format_number(value),
            radius=radius,
            cx=C.LEGEND_CX,
            cy=C.LEGEND_BASE_Y - radius,
            line=(C.LEGEND_CX, top, C.LEGEND_LINE_X1, top),
            text=(C.LEGEND_TEXT_X, top - C.LEGEND_TEXT_OFFSET),
        ))
    return entries

#------------------------------------------------------------------------
# Plotting

def plot_states(feature_collection, date, field, use_choropleth, fig=None):
    if fig is None: fig = go.Figure()
    features = feature_collection['features']
    names = [feature['properties']['NAME'] for feature in features]

    scheme = C.FIELD_TO_SCHEME[field] if use_choropleth else ['white']
    fills = [state_fill(feature, date, field, use_choropleth) for feature in features]
    # index into the scheme, nan when the color is undefined
    z = [np.nan if fill is None else scheme.index(fill) for fill in fills]

    fig.add_trace(go.Choropleth(
        geojson=geometry_collection(feature_collection),
        featureidkey='properties.NAME',
        locations=names,
        z=z,
        zmin=-0.5,
        zmax=len(scheme)-0.5,
        colorscale=discrete_colorscale(scheme),
        showscale=False,
        marker_line_color=C.STROKE_COLOR,
        hoverinfo='none', # tooltip is rendered by the page
        name='states',
    ))
    return fig

def plot_bubbles(feature_collection, date, r, fig=None):
    if fig is None: fig = go.Figure()
    if r is None: return fig

    features = renderable_features(feature_collection)
    lons = [feature['properties']['centroidCoordinates'][0] for feature in features]
    lats = [feature['properties']['centroidCoordinates'][1] for feature in features]

    for field in C.BUBBLE_FIELDS:
        color = C.FIELD_TO_COLOR[field]
        fig.add_trace(go.Scattergeo(
            lon=lons,
            lat=lats,
            mode='markers',
            marker=dict(
                size=[2 * r(get_value(feature, date, field)) for feature in features],
                sizemode='diameter',
                color=_rgba(color, C.FIELD_TO_FILL_OPACITY[field]),
                line=dict(color=color, width=1),
            ),
            hoverinfo='skip',
            showlegend=False,
            name=f'{field}-bubbles',
        ))
    return fig

def plot_map(feature_collection, date, field, use_choropleth):
    logger.debug('Plotting %s on %s (choropleth=%s)', field, date, use_choropleth)
    fig = plot_states(feature_collection, date, field, use_choropleth)
    if not use_choropleth:
        r = radius_scale(max_value(feature_collection, date, 'totalTestResults'))
        fig = plot_bubbles(feature_collection, date, r, fig=fig)

    fig.update_geos(
        scope='usa',
        projection=go.layout.geo.Projection(type='albers usa'),
        visible=False,
        bgcolor='rgba(0,0,0,0)',
    )
    fig.update_layout(
        autosize=False,
        width=C.WIDTH,
        height=C.HEIGHT,
        margin=C.MARGIN,
        showlegend=False,
        dragmode=False,
    )
    return fig

def plot_bubble_legend(max_value, r):
    fig = go.Figure()
    entries = legend_entries(max_value, r)
    shapes, annotations = [], []
    for entry in entries:
        cx, cy, radius = entry['cx'], entry['cy'], entry['radius']
        shapes.append(dict(type='circle', xref='x', yref='y',
                           x0=cx-radius, y0=cy-radius, x1=cx+radius, y1=cy+radius,
                           line=dict(color=C.STROKE_COLOR, width=1), fillcolor='rgba(0,0,0,0)'))
    for entry in entries:
        x0, y0, x1, y1 = entry['line']
        shapes.append(dict(type='line', xref='x', yref='y', x0=x0, y0=y0, x1=x1, y1=y1,
                           line=dict(color=C.STROKE_COLOR, width=1, dash='dash')))
    for entry in entries:
        x, y = entry['text']
        annotations.append(dict(x=x, y=y, xref='x', yref='y', text=entry['label'],
                                showarrow=False, xanchor='left', yanchor='bottom'))

    fig.update_layout(
        shapes=shapes,
        annotations=annotations,
        autosize=False,
        width=C.LEGEND_SIZE,
        height=C.LEGEND_SIZE,
        margin=dict(l=0, r=0, t=0, b=0),
        paper_bgcolor='rgba(0,0,0,0)',
        plot_bgcolor='rgba(0,0,0,0)',
        # svg-like canvas: origin top left
        xaxis=dict(range=[0, C.LEGEND_SIZE], visible=False, fixedrange=True),
        yaxis=dict(range=[C.LEGEND_SIZE, 0], visible=False, fixedrange=True),
    )
    return fig

#------------------------------------------------------------------------
# Tooltip

def hovered_state(hover_data, feature_collection):
    if not hover_data or not hover_data.get('points'): return None
    location = hover_data['points'][0].get('location')
    if location is None: return None
    for feature in feature_collection['features']:
        if feature['properties']['NAME'] == location:
            return feature
    return None

def tooltip_rows(feature, date):
    header = (feature['properties']['NAME'], format_date(parse_date(date)))
    rows = [
        (C.FIELD_TO_LABEL[field],
         format_number(get_value(feature, date, field)),
         format_number(get_value(feature, date, field, normalized=True)))
        for field in C.FIELDS
    ]
    return header, rows

def _tooltip_table(feature, date):
    (name, date_label), rows = tooltip_rows(feature, date)
    return html.Table([
        html.Thead(html.Tr(html.Td([name, html.Br(), html.Span(date_label, className='date')], colSpan=3))),
        html.Tbody(
            [html.Tr([html.Td(), html.Td('Total'), html.Td('Per capita*')])] +
            [html.Tr([html.Td(label), html.Td(total), html.Td(per_capita)]) for label, total, per_capita in rows]
        ),
    ], id='map-tooltip-table')

def render_tooltip(hover_data, feature_collection, date):
    """ (show, bbox, children) for the map's dcc.Tooltip. """
    feature = hovered_state(hover_data, feature_collection)
    if feature is None:
        return False, no_update, no_update
    bbox = hover_data['points'][0].get('bbox', no_update)
    return True, bbox, _tooltip_table(feature, date)
