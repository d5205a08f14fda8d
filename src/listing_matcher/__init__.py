"""Link free-text product listings to canonical product records."""

__version__ = "0.1.0"
