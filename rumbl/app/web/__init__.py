"""
HTML page routes.

Unlike ``api``, these routes render Jinja2 templates and are mounted at
the application root.
"""
