# This package groups reusable Streamlit components used by the role panels.
# It exists to keep navigation, cards, lists, and charts consistent across pages.
# Sharing these helpers keeps page modules focused on which records to show.

__all__ = ["nav_shell", "summary_cards", "record_list", "tables", "charts"]
