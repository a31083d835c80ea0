"""
Helpers Module - Utility functions for common operations
"""

from flask import request


STATIC_PATHS = ['/', '/about', '/projects', '/blog', '/contact']


def get_client_ip():
    """Get real client IP address"""
    forwarded = request.environ.get('HTTP_X_FORWARDED_FOR')
    if forwarded:
        return forwarded.split(',')[0].strip()
    return request.environ.get('REMOTE_ADDR', 'unknown')


def site_paths(resolver):
    """Every page path the site serves: static pages first, then each detail page"""
    return STATIC_PATHS + resolver.detail_paths()


def sitemap_priority(path):
    if path == '/':
        return '1.0'
    if path.count('/') > 1:
        return '0.8'
    return '0.6'


__all__ = ['STATIC_PATHS', 'get_client_ip', 'site_paths', 'sitemap_priority']
