"""framesmith - convert markup and CSS into layout-node trees."""

__version__ = "0.1.0"
