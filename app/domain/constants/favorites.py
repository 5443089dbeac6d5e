"""Business limits for the favorites list"""

MAX_FAVORITE_CITIES = 5
