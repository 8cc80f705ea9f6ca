COUNTRY_NAME = 'United States'

# Metric fields carried in each feature's dailyData
FIELDS = ['totalTestResults', 'positive', 'death']
FIELD_TO_LABEL = {
    'totalTestResults': 'Tests',
    'positive': 'Positive tests',
    'death': 'Deaths',
}
DEFAULT_FIELD = 'totalTestResults'
NORMALIZATION_POPULATION = 1000000 # per million

# Map canvas (px)
MARGIN = dict(l=10, r=10, t=10, b=10)
WIDTH, HEIGHT = 700, 400
STROKE_COLOR = '#ababab'

# Threshold color scales (per million), one per field
COLOR_LIMITS = {
    'death': [1, 2, 5, 10, 25, 50, 100],
    'positive': [50, 100, 250, 500, 1000, 2500, 5000],
    'totalTestResults': [100, 250, 500, 1000, 2500, 5000, 10000],
}
# ColorBrewer 8-class sequential schemes
SCHEME_GREYS = ['#ffffff', '#f0f0f0', '#d9d9d9', '#bdbdbd', '#969696', '#737373', '#525252', '#252525']
SCHEME_ORANGES = ['#fff5eb', '#fee6ce', '#fdd0a2', '#fdae6b', '#fd8d3c', '#f16913', '#d94801', '#8c2d04']
SCHEME_PURPLES = ['#fcfbfd', '#efedf5', '#dadaeb', '#bcbddc', '#9e9ac8', '#807dba', '#6a51a3', '#4a1486']
FIELD_TO_SCHEME = {
    'death': SCHEME_GREYS,
    'positive': SCHEME_ORANGES,
    'totalTestResults': SCHEME_PURPLES,
}

# Bubbles
FIELD_TO_COLOR = {
    'totalTestResults': '#696DC2',
    'positive': '#E5A968',
    'death': '#404856',
}
BUBBLE_FIELDS = ['totalTestResults', 'positive'] # drawn in this order
FIELD_TO_FILL_OPACITY = {
    'totalTestResults': 0.2,
    'positive': 0.8,
}
MAX_RADIUS = 50

# Bubble legend canvas
LEGEND_SIZE = 150
LEGEND_FRACTIONS = [0.1, 0.5, 1]
LEGEND_CX, LEGEND_BASE_Y = 52, 145
LEGEND_LINE_X1 = 130
LEGEND_TEXT_X, LEGEND_TEXT_OFFSET = 110, 5

# Lon/lat boxes covered by the albers usa composite projection
ALBERS_USA_EXTENTS = {
    'lower48': ((-125.0, 24.0), (-66.0, 50.0)),
    'alaska': ((-180.0, 51.0), (-129.0, 72.0)),
    'hawaii': ((-161.0, 18.5), (-154.5, 22.5)),
}

# Dates
DATE_FORMAT = '%Y%m%d'
DISPLAY_DATE_FORMAT = '%b. %d'

# For mapping covidtracking.com state codes
STATE_CODE_TO_NAME = {
    "AK": "Alaska",
    "AL": "Alabama",
    "AR": "Arkansas",
    "AS": "American Samoa",
    "AZ": "Arizona",
    "CA": "California",
    "CO": "Colorado",
    "CT": "Connecticut",
    "DC": "District of Columbia",
    "DE": "Delaware",
    "FL": "Florida",
    "GA": "Georgia",
    "GU": "Guam",
    "HI": "Hawaii",
    "IA": "Iowa",
    "ID": "Idaho",
    "IL": "Illinois",
    "IN": "Indiana",
    "KS": "Kansas",
    "KY": "Kentucky",
    "LA": "Louisiana",
    "MA": "Massachusetts",
    "MD": "Maryland",
    "ME": "Maine",
    "MI": "Michigan",
    "MN": "Minnesota",
    "MO": "Missouri",
    "MP": "Northern Mariana Islands",
    "MS": "Mississippi",
    "MT": "Montana",
    "NC": "North Carolina",
    "ND": "North Dakota",
    "NE": "Nebraska",
    "NH": "New Hampshire",
    "NJ": "New Jersey",
    "NM": "New Mexico",
    "NV": "Nevada",
    "NY": "New York",
    "OH": "Ohio",
    "OK": "Oklahoma",
    "OR": "Oregon",
    "PA": "Pennsylvania",
    "PR": "Puerto Rico",
    "RI": "Rhode Island",
    "SC": "South Carolina",
    "SD": "South Dakota",
    "TN": "Tennessee",
    "TX": "Texas",
    "UT": "Utah",
    "VA": "Virginia",
    "VI": "United States Virgin Islands",
    "VT": "Vermont",
    "WA": "Washington",
    "WI": "Wisconsin",
    "WV": "West Virginia",
    "WY": "Wyoming",
}
