# This package holds the page renderers of every role panel.
# It exists so each page owns its queries, row templates, and copy.
# Pages are wired to URL paths in src/portal/routes.py rather than in app.py.

__all__ = ["dashboards", "members", "transfers", "catalog", "activity", "staff", "commission", "account"]
