"""
Extensions Module - Centralized initialization of app-wide services
Keeps the content store and resolver off module globals so they can be
swapped out in tests.
"""

from flask import current_app
from utils.data import load_default_store
from utils.routing import RouteResolver


def init_content(app, store=None):
    """Attach the content store and its resolver to the app"""
    if store is None:
        store = load_default_store()
    app.extensions['content_store'] = store
    app.extensions['route_resolver'] = RouteResolver(store)
    app.logger.info(
        f"✓ Content loaded: {len(store.list_projects())} projects, {len(store.list_posts())} posts")
    return store


def get_store():
    return current_app.extensions['content_store']


def get_resolver():
    return current_app.extensions['route_resolver']


__all__ = ['init_content', 'get_store', 'get_resolver']
