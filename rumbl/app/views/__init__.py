"""Helpers exposed to Jinja2 templates."""
