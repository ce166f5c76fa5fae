import logging

from pgxrules.services.pharmacogenomics.config import get_config

# Configure logging
_config = get_config()

logging.basicConfig(
    level=getattr(logging, _config.log_level.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

if _config.verbose_logging:
    logging.getLogger("pgxrules").setLevel(logging.DEBUG)
