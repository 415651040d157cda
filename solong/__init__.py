"""A tile-map collect-and-escape game: map reading and validation, game rules, XPM sprites and a pygame window."""

__version__ = "1.0.0"