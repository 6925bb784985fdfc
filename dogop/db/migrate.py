import logging

from alembic import command
from alembic.config import Config

from dogop.db.base import normalize_database_url

logger = logging.getLogger(__name__)


def run_migrations(database_url: str, config_path: str = "alembic.ini") -> None:
    """Apply every pending Alembic revision. Safe to call on every startup."""
    alembic_cfg = Config(config_path)
    # ConfigParser interpolation treats "%" specially
    url = normalize_database_url(database_url).replace("%", "%%")
    alembic_cfg.set_main_option("sqlalchemy.url", url)
    # Logging is already configured by the application
    alembic_cfg.attributes["configure_logger"] = False
    logger.info("Applying database migrations")
    command.upgrade(alembic_cfg, "head")
