"""
Pages Routes - Public static pages
"""

from flask import render_template, request, current_app
from extensions import get_resolver
from utils.contact import ContactForm, submit_locally
from utils.helpers import get_client_ip, site_paths, sitemap_priority
from utils.ui_helpers import skills_chart_config
from . import pages_bp


@pages_bp.route('/')
def index():
    """Landing page"""
    return render_template('pages/home.html')


@pages_bp.route('/about')
def about():
    """About page with CV and skills chart"""
    return render_template('pages/about.html', chart_config=skills_chart_config())


@pages_bp.route('/contact', methods=['GET', 'POST'])
def contact():
    """Contact page; POST is the form fallback for browsers without JavaScript"""
    if request.method == 'GET':
        return render_template('pages/contact.html', form=ContactForm())

    form = ContactForm.from_mapping(request.form)
    client_ip = get_client_ip()
    form.submit(lambda payload: submit_locally(payload, client_ip=client_ip))

    status_code = 200 if form.succeeded else 400
    return render_template('pages/contact.html', form=form), status_code


@pages_bp.route('/sitemap.xml')
def sitemap():
    """Sitemap listing every static and detail page"""
    base_url = (current_app.config.get('SITE_URL') or request.url_root).rstrip('/')

    sitemap_xml = ['<?xml version="1.0" encoding="UTF-8"?>']
    sitemap_xml.append('<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">')

    for path in site_paths(get_resolver()):
        sitemap_xml.append('<url>')
        sitemap_xml.append(f'<loc>{base_url}{path}</loc>')
        sitemap_xml.append(f'<priority>{sitemap_priority(path)}</priority>')
        sitemap_xml.append('</url>')

    sitemap_xml.append('</urlset>')

    response = current_app.make_response('\n'.join(sitemap_xml))
    response.headers['Content-Type'] = 'application/xml; charset=utf-8'
    return response


@pages_bp.route('/robots.txt')
def robots():
    base_url = (current_app.config.get('SITE_URL') or request.url_root).rstrip('/')
    robots_txt = (
        "User-agent: *\n"
        "Allow: /\n"
        "Disallow: /api/\n"
        "\n"
        f"Sitemap: {base_url}/sitemap.xml\n"
    )

    response = current_app.make_response(robots_txt)
    response.headers['Content-Type'] = 'text/plain; charset=utf-8'
    return response
