# ftskit/middlewares/logging.py

import logging
import sys
import requests
from ftskit.core.config import settings


class LogtailHandler(logging.Handler):
    """Ships formatted records to BetterStack."""

    def emit(self, record):
        log_entry = self.format(record)
        try:
            response = requests.post(
                "https://in.logs.betterstack.com",
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {settings.BETTERSTACK_API_KEY}",
                },
                json={
                    "dt": record.created,
                    "message": log_entry,
                },
                timeout=3,
            )
            if response.status_code != 200:
                sys.stderr.write(f"❌ BetterStack logging failed: {response.text}\n")
        except requests.RequestException as e:
            sys.stderr.write(f"❌ Exception while logging to BetterStack: {e}\n")


def setup_logging(level: int = logging.INFO, stream=None):
    logger = logging.getLogger()
    logger.setLevel(level)
    logger.handlers = []

    formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
    )

    stream_handler = logging.StreamHandler(stream or sys.stdout)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if settings.ENV == "production" and settings.BETTERSTACK_API_KEY:
        logtail_handler = LogtailHandler()
        logtail_handler.setFormatter(formatter)
        logger.addHandler(logtail_handler)

    logger.info("✅ Logging system initialized")
