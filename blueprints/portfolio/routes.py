"""
Portfolio Routes - Project list and detail pages
"""

from flask import render_template, current_app
from extensions import get_resolver
from utils.routing import RouteType
from . import portfolio_bp


@portfolio_bp.route('')
@portfolio_bp.route('/')
def project_list():
    """All projects as summary cards, in catalog order"""
    resolution = get_resolver().resolve(RouteType.PROJECTS)
    return render_template('projects/list.html', projects=resolution.result)


@portfolio_bp.route('/<slug>')
def project_detail(slug):
    """Project detail page"""
    resolution = get_resolver().resolve(RouteType.PROJECTS, slug)

    if not resolution.found:
        current_app.logger.info(f"Project not found: {slug}")
        return render_template('not_found.html',
                               message='Project not found.',
                               back_url='/projects',
                               back_label='Back to Projects'), 404

    return render_template('projects/detail.html', project=resolution.result)
