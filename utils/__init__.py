"""
Utils Package - Centralized utility modules initialization
"""

from .data import ContentStore, load_default_store
from .routing import RouteType, NOT_FOUND, Resolution, RouteResolver
from .contact import (
    ValidationError,
    TransportError,
    ContactSubmission,
    validate_submission,
    process_submission,
    submit_locally,
    ContactClient,
    FormStatus,
    ContactForm
)
from .notifications import send_admin_notification, notifications_enabled
from .helpers import get_client_ip, site_paths
from .ui_helpers import (
    get_nav_items,
    inject_blueprint_assets,
    get_page_specific_class,
    wrap_label,
    skills_chart_config
)

__all__ = [

    # Content
    'ContentStore',
    'load_default_store',
    'RouteType',
    'NOT_FOUND',
    'Resolution',
    'RouteResolver',

    # Contact
    'ValidationError',
    'TransportError',
    'ContactSubmission',
    'validate_submission',
    'process_submission',
    'submit_locally',
    'ContactClient',
    'FormStatus',
    'ContactForm',

    # Notifications
    'send_admin_notification',
    'notifications_enabled',

    # Helpers
    'get_client_ip',
    'site_paths',

    # UI Helpers
    'get_nav_items',
    'inject_blueprint_assets',
    'get_page_specific_class',
    'wrap_label',
    'skills_chart_config'
]
