# Course Populator Web Application
import logging
from typing import Any, Dict

from flask import Flask, Blueprint, current_app, request, jsonify, render_template
from pydantic import ValidationError

from config.config import config
from backend.etl.course_import import SEARCH_TERMS
from backend.etl.import_session import ImportSession, ImportAlreadyRunning
from backend.models.import_settings import ImportSettings, MAX_COURSES_CHOICES

logger = logging.getLogger(__name__)

# Create API blueprint
api_bp = Blueprint('api', __name__, url_prefix='/api')

FORM_FIELDS = ('supabase_url', 'supabase_key', 'api_key', 'max_courses_per_term')


def get_import_session() -> ImportSession:
    return current_app.extensions['import_session']


def _validation_errors(error: ValidationError):
    return [
        {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
        for err in error.errors()
    ]


def _request_overrides() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if data is None:
        data = request.form.to_dict()
    return {field: data.get(field) for field in FORM_FIELDS}


@api_bp.route('/import', methods=['POST'])
def start_import():
    """Start an import with the submitted credentials."""
    try:
        settings = ImportSettings.from_config(config, _request_overrides())
    except ValidationError as e:
        return jsonify({"error": "Invalid import settings", "details": _validation_errors(e)}), 400

    import_session = get_import_session()
    try:
        import_session.start(settings, background=current_app.config.get("IMPORT_IN_BACKGROUND", True))
    except ImportAlreadyRunning as e:
        return jsonify({"error": str(e)}), 409

    return jsonify(import_session.snapshot()), 202


@api_bp.route('/import/status')
def import_status():
    """Current phase, log feed and summary."""
    return jsonify(get_import_session().snapshot())


@api_bp.route('/import/reset', methods=['POST'])
def reset_import():
    """Go back to credential entry."""
    import_session = get_import_session()
    try:
        import_session.reset()
    except ImportAlreadyRunning as e:
        return jsonify({"error": str(e)}), 409
    return jsonify(import_session.snapshot())


def create_app(import_session: ImportSession = None) -> Flask:
    """
    Create the Flask application.

    Args:
        import_session: Session holding import state (a new one if omitted)

    Returns:
        Flask application instance
    """
    app = Flask(__name__)
    app.config.update(
        SECRET_KEY=config["app"]["secret_key"],
        DEBUG=config["app"]["debug"]
    )
    app.extensions['import_session'] = import_session or ImportSession()

    @app.route('/')
    def index():
        """Import form, log feed and summary."""
        return render_template(
            'index.html',
            app_name=config["app"]["name"],
            state=get_import_session().snapshot(),
            max_courses_choices=MAX_COURSES_CHOICES,
            default_max_courses=config["importer"]["max_courses_per_term"],
            term_count=len(SEARCH_TERMS)
        )

    @app.route('/health')
    def health():
        """Health check endpoint."""
        return jsonify({
            "status": "healthy",
            "version": "1.0.0",
            "importing": get_import_session().is_running
        })

    app.register_blueprint(api_bp)
    logger.info("Course Populator web app created")
    return app
