# This package contains the Streamlit member portal for master, admin, agent, and customer roles.
# It exists so each role gets a read-only panel over members, transfers, products, and activity.
# The modules separate API access, caching, filtering, and page rendering to keep maintenance straightforward.

__all__ = ["app"]
