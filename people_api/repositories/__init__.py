"""
Persistence adapters.

These modules encapsulate how people are stored and retrieved (today a JSON
file). Routers depend on the store instance held by the app, never on the file.
"""

from people_api.repositories.json_storage import PeopleStore

__all__ = ["PeopleStore"]
