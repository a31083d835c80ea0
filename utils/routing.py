"""
Routing Module - Resolves list and detail routes against the content store
"""

from enum import Enum
from typing import List, NamedTuple, Optional


class RouteType(str, Enum):
    PROJECTS = 'projects'
    BLOG = 'blog'


class _NotFound:
    """Sentinel returned when a detail route has no matching record"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return 'NOT_FOUND'


NOT_FOUND = _NotFound()


class Resolution(NamedTuple):
    route_type: RouteType
    slug: Optional[str]
    result: object

    @property
    def is_list(self) -> bool:
        return self.slug is None

    @property
    def found(self) -> bool:
        return self.result is not NOT_FOUND


class RouteResolver:
    """
    Maps (route type, optional slug) to records.

    A list route returns every record in store order; a detail route returns the
    single matching record or NOT_FOUND. Unknown slugs never raise.
    """

    def __init__(self, store):
        self.store = store

    def resolve(self, route_type, slug: Optional[str] = None) -> Resolution:
        route_type = RouteType(route_type)

        if slug is None:
            if route_type is RouteType.PROJECTS:
                records = self.store.list_projects()
            else:
                records = self.store.list_posts()
            return Resolution(route_type, None, records)

        if route_type is RouteType.PROJECTS:
            record = self.store.find_project_by_slug(slug)
        else:
            record = self.store.find_post_by_slug(slug)
        return Resolution(route_type, slug, record if record is not None else NOT_FOUND)

    def enumerate_slugs(self, route_type) -> List[str]:
        route_type = RouteType(route_type)
        if route_type is RouteType.PROJECTS:
            return self.store.project_slugs()
        return self.store.post_slugs()

    def detail_paths(self) -> List[str]:
        """Every reachable detail URL, projects first"""
        return [
            f'/{route_type.value}/{slug}'
            for route_type in RouteType
            for slug in self.enumerate_slugs(route_type)
        ]


__all__ = ['RouteType', 'NOT_FOUND', 'Resolution', 'RouteResolver']
