"""
Blog Routes - Post list and detail pages
"""

from flask import render_template, current_app
from extensions import get_resolver
from utils.routing import RouteType
from . import blog_bp


@blog_bp.route('')
@blog_bp.route('/')
def post_list():
    resolution = get_resolver().resolve(RouteType.BLOG)
    return render_template('blog/list.html', posts=resolution.result)


@blog_bp.route('/<slug>')
def post_detail(slug):
    resolution = get_resolver().resolve(RouteType.BLOG, slug)

    if not resolution.found:
        current_app.logger.info(f"Post not found: {slug}")
        return render_template('not_found.html',
                               message='Post not found.',
                               back_url='/blog',
                               back_label='Back to Blog'), 404

    return render_template('blog/detail.html', post=resolution.result)
