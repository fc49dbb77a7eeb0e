"""
Application Entry Point

Load configuration and initialize logging.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from src.config import load_config
from src.utils.exceptions import BootstrapError
from src.utils.logger import setup_logging, get_logger


def initialize_systems(env_file=None):
    """
    Initialize configuration and logging.

    Args:
        env_file: Environment file path (default: .env in the working directory)

    Returns:
        Loaded configuration
    """
    config = load_config(env_file)

    setup_logging(
        level=config.app.log_level,
        log_file=config.app.log_file,
        format_type=config.app.log_format,
        console=True
    )

    logger = get_logger(__name__)
    logger.info(f"{config.app.name} initialized in {config.app.env} environment")
    logger.info(f"Database: {config.database.safe_url()} "
                f"(pool {config.database.pool_min}-{config.database.pool_max})")

    return config


def main():
    """Main entry point."""
    logger = get_logger(__name__)

    try:
        config = initialize_systems()
    except BootstrapError as e:
        logger.error(f"Fatal error loading configuration: {e}", exc_info=True)
        sys.exit(1)

    logger.info(f"Listening address: {config.app.host}:{config.app.port} ({config.app.url})")


if __name__ == '__main__':
    main()
