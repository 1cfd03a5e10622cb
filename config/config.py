"""
Configuration settings for the Course Populator application.

This module provides configuration parameters for the application, including
API keys, Supabase settings, and the defaults used by the course import job.
"""
import os
import copy
import logging
from typing import Dict, Any
from dotenv import load_dotenv

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Load environment variables from .env file
env_path = os.path.join(os.path.dirname(os.path.dirname(__file__)), '.env')
if os.path.exists(env_path):
    load_dotenv(env_path)
    logger.info(f"Loaded environment variables from {env_path}")
else:
    logger.warning(f".env file not found at {env_path}. Using default configuration or environment variables.")
    # Try loading from .env.example for development
    example_env_path = os.path.join(os.path.dirname(os.path.dirname(__file__)), '.env.example')
    if os.path.exists(example_env_path):
        load_dotenv(example_env_path)
        logger.info(f"Loaded environment variables from {example_env_path} (for development only)")
    else:
        logger.warning(f".env.example file not found. Using default configuration or environment variables.")

# Default configuration
default_config = {
    # Application settings
    "app": {
        "name": "Course Populator",
        "debug": os.environ.get("APP_DEBUG", "false").lower() == "true",
        "environment": os.environ.get("APP_ENVIRONMENT", "development"),
        "secret_key": os.environ.get("APP_SECRET_KEY", "dev-secret-key-change-in-production")
    },

    # Supabase project receiving the imported courses
    "supabase": {
        "url": os.environ.get("SUPABASE_URL", ""),
        "key": os.environ.get("SUPABASE_KEY", "")
    },

    # Golf Course API settings
    "golf_api": {
        "base_url": os.environ.get("GOLF_API_BASE_URL", "https://api.golfcourseapi.com/v1"),
        "api_key": os.environ.get("GOLF_API_KEY", ""),
        "timeout_seconds": float(os.environ.get("GOLF_API_TIMEOUT", 30))
    },

    # Import job settings
    "importer": {
        "max_courses_per_term": int(os.environ.get("IMPORT_MAX_COURSES_PER_TERM", 3)),
        "delay_seconds": float(os.environ.get("IMPORT_DELAY_SECONDS", 2.5)),
        "log_file": os.environ.get("IMPORT_LOG_FILE", "logs/course_import.log")
    }
}

def _mask(value: str) -> str:
    return "********" if value else ""

def load_config() -> Dict[str, Any]:
    """
    Load configuration, with environment variables overriding defaults.

    Returns:
        Dict containing merged configuration settings
    """
    # Environment variables are already applied in the default_config.
    config = copy.deepcopy(default_config)

    # Log loaded configuration (excluding sensitive information)
    log_config = copy.deepcopy(config)
    log_config["app"]["secret_key"] = _mask(log_config["app"]["secret_key"])
    log_config["supabase"]["key"] = _mask(log_config["supabase"]["key"])
    log_config["golf_api"]["api_key"] = _mask(log_config["golf_api"]["api_key"])

    logger.info(f"Configuration loaded: {log_config}")

    return config

# Load configuration on module import
config = load_config()
