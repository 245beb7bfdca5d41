import logging
import os
import sys

import uvicorn

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

# Allow running from a checkout without installing the package
current_dir = os.path.dirname(os.path.abspath(__file__))
src_path = os.path.join(current_dir, "src")
sys.path.insert(0, src_path)


def _flag(name: str) -> str:
    return "set" if os.environ.get(name) else "not set"


if __name__ == "__main__":
    from clinicvoice.core.config import get_settings

    try:
        settings = get_settings()
    except ValueError as e:
        logger.error(f"Configuration validation failed: {e}")
        sys.exit(1)

    port = int(os.environ.get("PORT", settings.port))
    host = os.environ.get("HOST", settings.host)

    logger.info("=" * 60)
    logger.info(f"{settings.app_name} v{settings.app_version} ({settings.app_env})")
    logger.info(f"  ELEVENLABS_API_KEY: {_flag('ELEVENLABS_API_KEY')}")
    logger.info(f"  ELEVENLABS_AGENT_ID: {_flag('ELEVENLABS_AGENT_ID')}")
    logger.info(f"  EMAIL_API_KEY: {_flag('EMAIL_API_KEY')}")
    logger.info(f"Starting uvicorn on {host}:{port}")
    logger.info("=" * 60)

    try:
        uvicorn.run(
            "clinicvoice.app:app",
            host=host,
            port=port,
            # The in-memory store is per process
            workers=1,
            log_level=settings.logging.level.lower(),
            access_log=True,
            reload=settings.is_development and settings.debug,
        )
    except KeyboardInterrupt:
        logger.info("Shutting down due to keyboard interrupt")
        sys.exit(0)
