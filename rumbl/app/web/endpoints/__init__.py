"""Page endpoint modules, aggregated in ``web/router.py``."""
