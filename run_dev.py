import uvicorn
from dotenv import load_dotenv
import os
import logging
from typing import Any, Dict, Optional

from alice_api.settings import DOTENV_PATH, Settings, get_settings

# Configure logging before uvicorn imports the application
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s RUN_DEV.PY - [%(levelname)s] - %(message)s'
)
logger = logging.getLogger("run_dev_script")

TRUTHY = ["true", "1", "yes", "on", "t"]


def uvicorn_options(settings: Settings, reload_override: Optional[str] = None) -> Dict[str, Any]:
    """
    Keyword arguments for uvicorn.run, taken from the resolved settings.

    Reload follows debug mode unless reload_override (DEV_SERVER_RELOAD) is given.
    """
    reload_bool = settings.debug_mode if reload_override is None else reload_override.lower() in TRUTHY
    return {
        "host": settings.host,
        "port": settings.port,
        "log_level": "debug" if settings.debug_mode else "info",
        "reload": reload_bool,
    }


def log_effective_settings(settings: Settings) -> None:
    logger.info(f"Environment: {settings.environment} (debug_mode={settings.debug_mode})")
    logger.info(f"JWT secret: {'placeholder default' if settings.uses_insecure_jwt_secret else '********'}")
    logger.info(f"Storage backend: {settings.storage_backend}"
                + (f" ({settings.sqlite_db_path})" if settings.storage_backend == "sqlite" else ""))
    logger.info(f"CORS origins: {settings.cors_origin_list}")


if __name__ == "__main__":
    if DOTENV_PATH.exists():
        logger.info(f".env file FOUND at: {DOTENV_PATH}")
        load_dotenv(dotenv_path=DOTENV_PATH, override=True)
    else:
        logger.warning(f".env file NOT FOUND at: {DOTENV_PATH}. "
                       "Relying on OS environment variables and Settings defaults.")

    # The same resolution the application performs at startup
    settings = get_settings()
    settings.ensure_safe_for_startup()
    log_effective_settings(settings)

    options = uvicorn_options(settings, os.getenv("DEV_SERVER_RELOAD"))
    logger.info(f"Starting Uvicorn server with {options}")

    uvicorn.run("alice_api.main:app", **options)
