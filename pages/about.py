import dash
from dash import dcc
import dash_bootstrap_components as dbc

import constants as C

dash.register_page(__name__, path='/', name='About', title='About', id='about-link')

about_md = f"""
### COVID-19 testing in the {C.COUNTRY_NAME}

Daily state-level counts of tests, positive tests and deaths, as reported by
[The COVID Tracking Project](https://covidtracking.com/).

* **Choropleth** shades each state by the selected metric per million people.
* **Bubbles** compare total tests (purple) with positive tests (orange); bubble
  area grows with the count.

Hover a state on the map for its totals and per capita values.
"""

layout = dbc.Container([
    dbc.Col([], width=2),
    dbc.Col([
        dbc.Row([
            dcc.Markdown(about_md)
        ])
    ], width = 8),
    dbc.Col([], width=2),
])
