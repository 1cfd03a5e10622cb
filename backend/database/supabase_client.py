"""
Supabase client integration for the Course Populator application.

Credentials are supplied per import run, so a client is created for each run
instead of being kept as a process-wide singleton.
"""
import logging

from supabase import create_client, Client

# Configure logging
logger = logging.getLogger(__name__)


def create_supabase(supabase_url: str, supabase_key: str) -> Client:
    """
    Create a Supabase client for the given project.

    Args:
        supabase_url: Project URL, e.g. https://your-project.supabase.co
        supabase_key: Anon or service-role key

    Returns:
        Supabase client instance
    """
    if not supabase_url or not supabase_key:
        logger.error("Supabase credentials not configured")
        raise ValueError("Supabase URL and key must be provided")

    client = create_client(supabase_url, supabase_key)
    logger.info("Supabase client initialized")
    return client
