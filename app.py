"""
Portfolio Site - Main Application Entry Point
Application Factory Pattern with one blueprint per site section

This module initializes the Flask application with its configuration, content
store and middleware. All actual route handling is delegated to blueprints.
"""

import os
from datetime import datetime
from flask import Flask, render_template, request
from config import get_config
from extensions import init_content
from utils.export import register_commands

# Import all blueprints
from blueprints.pages import pages_bp
from blueprints.portfolio import portfolio_bp
from blueprints.blog import blog_bp
from blueprints.api import api_bp


def create_app(config_name=None, store=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)
        store (ContentStore): Content to serve (optional, defaults to the site's own content)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    conf = get_config(config_name)
    app.config.from_object(conf)

    init_content(app, store)

    register_blueprints(app)
    register_error_handlers(app)
    register_hooks(app)
    register_commands(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio site is running'}, 200

    return app


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(pages_bp)
    app.register_blueprint(portfolio_bp)
    app.register_blueprint(blog_bp)
    app.register_blueprint(api_bp)


def register_error_handlers(app):
    """Register custom error handlers"""

    @app.errorhandler(404)
    def page_not_found(e):
        return render_template('404.html'), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        response = app.make_response((f"Method {request.method} Not Allowed", 405))
        response.mimetype = 'text/plain'
        allowed = e.valid_methods or []
        if allowed:
            response.headers['Allow'] = ', '.join(allowed)
        return response

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        return render_template('500.html'), 500


def register_hooks(app):
    """Register request/response hooks and context processors"""

    @app.context_processor
    def inject_global_vars():
        from utils.ui_helpers import get_nav_items, inject_blueprint_assets, get_page_specific_class

        blueprint_assets = inject_blueprint_assets()
        page_class = get_page_specific_class(
            blueprint_assets.get('current_blueprint'),
            request.endpoint.split('.')[-1] if request.endpoint else None
        )

        return {
            'site_name': app.config.get('SITE_NAME'),
            'owner_name': app.config.get('OWNER_NAME'),
            'current_year': datetime.now().year,
            'nav_items': get_nav_items(request.path),
            'blueprint_styles': blueprint_assets.get('blueprint_styles', []),
            'current_blueprint': blueprint_assets.get('current_blueprint'),
            'page_class': page_class
        }

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['Content-Security-Policy'] = (
            "default-src 'self'; "
            "script-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net; "
            "style-src 'self' 'unsafe-inline' https://fonts.googleapis.com; "
            "font-src 'self' https://fonts.gstatic.com; "
            "img-src 'self' data: https://placehold.co; "
            "connect-src 'self'; "
            "frame-ancestors 'none';"
        )
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
        return response


# Create app instance for gunicorn
app = create_app()

if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=5000,
        debug=(env == 'development')
    )
