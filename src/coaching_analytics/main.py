"""Build a ProgressEngine over the file-backed stores described by Settings."""

from coaching_analytics.config import Settings, get_settings
from coaching_analytics.engine import ProgressEngine
from coaching_analytics.logging_setup import configure_logging
from coaching_analytics.storage.catalog import YamlCourseCatalog
from coaching_analytics.storage.mood import JsonMoodStore
from coaching_analytics.storage.progress import JsonProgressStore
from coaching_analytics.storage.sessions import JsonSessionStore
from coaching_analytics.storage.users import JsonUserDirectory


def build_engine(settings: Settings | None = None) -> ProgressEngine:
    """Configure logging and wire the engine to the configured data directory."""
    settings = settings or get_settings()
    configure_logging(production=settings.is_production)

    data_dir = settings.resolved_data_dir
    return ProgressEngine(
        catalog=YamlCourseCatalog(settings.resolved_catalog_path),
        progress=JsonProgressStore(settings.progress_dir),
        sessions=JsonSessionStore(settings.sessions_dir),
        moods=JsonMoodStore(data_dir),
        users=JsonUserDirectory(data_dir),
        organization=settings.certificate_organization,
    )
