"""
Portfolio Routes - Project details and interactive data
Handles: Modal fragment, project JSON, typewriter timeline
"""

from flask import render_template, jsonify, current_app
from utils.data import load_data
from utils.helpers import find_project
from utils.ui_helpers import get_typewriter_payload, get_modal_context
from . import portfolio_bp


@portfolio_bp.route('/projects/<project_id>')
def project_modal(project_id):
    """Modal fragment for a project, fetched by static/js/modal.js"""
    profile = load_data()
    project = find_project(profile, project_id)
    if not project:
        return render_template('404.html'), 404

    context = get_modal_context(project)
    return render_template('partials/project_modal.html',
                           project=project,
                           **context)


@portfolio_bp.route('/api/projects')
def list_projects():
    """All projects as JSON"""
    profile = load_data()
    return jsonify({'projects': [p.to_dict() for p in profile.projects]})


@portfolio_bp.route('/api/projects/<project_id>')
def project_detail(project_id):
    """One project as JSON"""
    profile = load_data()
    project = find_project(profile, project_id)
    if not project:
        current_app.logger.info(f"Project not found: {project_id}")
        return jsonify({'error': 'Project not found'}), 404
    return jsonify(project.to_dict())


@portfolio_bp.route('/api/typewriter')
def typewriter():
    """Texts, speeds and the replay timeline of the hero typewriter"""
    profile = load_data()
    return jsonify(get_typewriter_payload(profile.tagline_texts))
