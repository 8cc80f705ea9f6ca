""" Helper functions for scales and number/date formatting. """
import math
import numpy as np

from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP

import constants as C


def scale_threshold(thresholds, colors):
    """ Threshold scale: maps a value to the color of the bin it falls in.

    Args:
        thresholds (list): N ascending bin edges.
        colors (list): N+1 colors; colors[i] covers thresholds[i-1] <= x < thresholds[i].

    Returns:
        callable: value -> color, or None when the value is nan.
    """
    if len(colors) != len(thresholds) + 1:
        raise ValueError(f'Expected {len(thresholds)+1} colors for {len(thresholds)} thresholds, got {len(colors)}')
    edges = np.asarray(thresholds, dtype=float)

    def _scale(x):
        if x is None or np.isnan(x): return None
        return colors[int(np.searchsorted(edges, x, side='right'))]

    return _scale


def scale_sqrt(domain, range_):
    """ Square root scale, unclamped.

    Args:
        domain (tuple): (d0, d1) input extent.
        range_ (tuple): (r0, r1) output extent.
    """
    _sqrt = lambda x: np.sign(x) * np.sqrt(np.abs(x))
    (d0, d1), (r0, r1) = map(float, domain), map(float, range_)
    s0, s1 = _sqrt(d0), _sqrt(d1)

    def _scale(x):
        if s0 == s1: return (r0 + r1) / 2
        t = (_sqrt(float(x)) - s0) / (s1 - s0)
        return float(r0 + t * (r1 - r0))

    return _scale


def round_significant(x, digits=1):
    # half away from zero, e.g. 15 -> 20, 25 -> 30
    if x == 0 or not math.isfinite(x): return x
    d = Decimal(repr(float(x)))
    quantum = Decimal(1).scaleb(d.adjusted() - digits + 1)
    return float(d.quantize(quantum, rounding=ROUND_HALF_UP))


def format_number(x):
    return f'{x:,.0f}'


def parse_date(date_str):
    try:
        return datetime.strptime(str(date_str), C.DATE_FORMAT)
    except ValueError:
        return None


def format_date(date):
    if date is None: return ''
    return date.strftime(C.DISPLAY_DATE_FORMAT)


def discrete_colorscale(colors):
    """ Step colorscale for plotly: with zmin=-0.5 and zmax=len(colors)-0.5,
    integer z == i renders exactly colors[i]. """
    n = len(colors)
    colorscale = []
    for i, color in enumerate(colors):
        colorscale.append([i / n, color])
        colorscale.append([(i + 1) / n, color])
    return colorscale
