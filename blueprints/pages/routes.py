"""
Pages Routes - The portfolio page and SEO endpoints
"""

from datetime import datetime
from flask import render_template, request, current_app
from utils.data import load_data
from utils.helpers import find_project
from utils.ui_helpers import get_typewriter_payload, get_modal_context
from . import pages_bp


@pages_bp.route('/')
def index():
    """Single page: hero, about/skills, projects, contact"""
    profile = load_data()

    # ?project=<id> renders the page with that project's modal already open
    requested = request.args.get('project')
    project = find_project(profile, requested) if requested else None
    if requested and project is None:
        current_app.logger.info(f"Unknown project requested: {requested!r}")

    return render_template('index.html',
                           profile=profile,
                           typewriter=get_typewriter_payload(profile.tagline_texts),
                           **get_modal_context(project))


@pages_bp.route('/sitemap.xml')
def sitemap():
    """Generate sitemap for SEO"""
    profile = load_data()
    base_url = request.url_root.rstrip('/')
    today = datetime.now().strftime('%Y-%m-%d')

    sitemap_entries = [{
        'loc': f'{base_url}/',
        'changefreq': 'weekly',
        'priority': '1.0',
        'lastmod': today
    }]

    for project in profile.projects:
        sitemap_entries.append({
            'loc': f'{base_url}/?project={project.id}',
            'changefreq': 'monthly',
            'priority': '0.8',
            'lastmod': today
        })

    sitemap_xml = ['<?xml version="1.0" encoding="UTF-8"?>']
    sitemap_xml.append('<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">')

    for entry in sitemap_entries:
        sitemap_xml.append('<url>')
        sitemap_xml.append(f'<loc>{entry["loc"]}</loc>')
        sitemap_xml.append(f'<lastmod>{entry["lastmod"]}</lastmod>')
        sitemap_xml.append(f'<changefreq>{entry["changefreq"]}</changefreq>')
        sitemap_xml.append(f'<priority>{entry["priority"]}</priority>')
        sitemap_xml.append('</url>')

    sitemap_xml.append('</urlset>')

    response = current_app.make_response('\n'.join(sitemap_xml))
    response.headers['Content-Type'] = 'application/xml; charset=utf-8'
    return response


@pages_bp.route('/robots.txt')
def robots():
    """Generate robots.txt for SEO"""
    robots_txt = """User-agent: *
Allow: /
Disallow: /api/
Disallow: /static/

Sitemap: """ + request.url_root.rstrip('/') + """/sitemap.xml"""

    response = current_app.make_response(robots_txt)
    response.headers['Content-Type'] = 'text/plain; charset=utf-8'
    return response
