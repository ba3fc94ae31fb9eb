import os
import logging
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r, using %d", name, raw, default)
        return default


INVERT_OUTPUT_PATH = os.getenv("INVERT_OUTPUT_PATH", "inverted.jpg")
OIL_OUTPUT_PATH = os.getenv("OIL_OUTPUT_PATH", "oiled.jpg")
JPEG_QUALITY = _int_env("JPEG_QUALITY", 95)
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
SHOW_WORKER_PROGRESS = os.getenv("SHOW_WORKER_PROGRESS", "0").strip().lower() in {"1", "true", "yes", "on"}

LOG_FORMAT = '%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s'
LOG_DATEFMT = '%H:%M:%S'
