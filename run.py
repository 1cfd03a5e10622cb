#!/usr/bin/env python
"""
Entry point for running the Course Populator application.

This module sets up the Python path and starts the Flask application, or
runs a one-time course import from the command line.

Usage:
    python run.py              # Run the web app
    python run.py --import     # Run a one-time course import and exit
"""
import os
import sys
import argparse

# Add the project root directory to Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)

from pydantic import ValidationError

# Import configuration
from config.config import config
from backend.models.import_settings import MAX_COURSES_CHOICES


def run_webapp(host='0.0.0.0', port=8000):
    """
    Run the Flask web application.

    Args:
        host: Host to bind to
        port: Port to listen on
    """
    from backend.app import create_app
    app = create_app()
    app.run(host=host, port=port, debug=config["app"]["debug"])


def print_summary(results):
    print(f"Course Import Summary:")
    print(f"- Start Time: {results['start_time']}")
    print(f"- End Time: {results['end_time']}")
    print(f"- Duration: {results['duration_seconds']} seconds")
    print(f"- Terms Processed: {results['terms_processed']}")
    print(f"- Courses Added: {results['courses_added']}")
    print(f"- Holes Added: {results['holes_added']}")
    print(f"- Errors: {len(results['errors'])}")

    if results['errors']:
        print("\nErrors:")
        for error in results['errors']:
            print(f"- {error}")


def run_import(args) -> int:
    """
    Run a one-time course import.

    Args:
        args: Parsed command line arguments

    Returns:
        Process exit code
    """
    from backend.etl.course_import import configure_import_logging, run_course_import
    from backend.models.import_settings import ImportSettings

    try:
        settings = ImportSettings.from_config(config, {
            "supabase_url": args.supabase_url,
            "supabase_key": args.supabase_key,
            "api_key": args.api_key,
            "max_courses_per_term": args.max_courses,
            "delay_seconds": args.delay
        })
    except ValidationError as e:
        print("Invalid import settings:", file=sys.stderr)
        for err in e.errors():
            print(f"- {'.'.join(str(part) for part in err['loc'])}: {err['msg']}", file=sys.stderr)
        return 2

    configure_import_logging(os.path.join(project_root, config["importer"]["log_file"]))
    results = run_course_import(settings)
    print_summary(results)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Course Populator")
    parser.add_argument('--import', dest='run_import', action='store_true',
                        help='Run a one-time course import and exit')
    parser.add_argument('--port', type=int, default=8000, help='Port to run the web server on')
    parser.add_argument('--supabase-url', help='Supabase project URL (default: SUPABASE_URL)')
    parser.add_argument('--supabase-key', help='Supabase key (default: SUPABASE_KEY)')
    parser.add_argument('--api-key', help='Golf Course API key (default: GOLF_API_KEY)')
    parser.add_argument('--max-courses', type=int, choices=MAX_COURSES_CHOICES,
                        help='Max courses imported per search term')
    parser.add_argument('--delay', type=float, help='Seconds to wait after each course')
    return parser


if __name__ == '__main__':
    args = build_parser().parse_args()

    if args.run_import:
        sys.exit(run_import(args))
    else:
        run_webapp(port=args.port)
