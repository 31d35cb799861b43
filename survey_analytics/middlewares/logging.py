# survey_analytics/middlewares/logging.py

import logging
import sys
import requests
from survey_analytics.core.config import settings


class BetterStackHandler(logging.Handler):
    """Ships formatted records to BetterStack; never raises into the caller."""

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
                    "service": settings.SERVICE_NAME,
                },
                timeout=3,
            )
            if response.status_code not in (200, 202):
                sys.stderr.write(f"❌ BetterStack logging failed: {response.text}\n")
        except requests.RequestException as e:
            sys.stderr.write(f"❌ Exception while logging to BetterStack: {e}\n")


def setup_logging():
    logger = logging.getLogger()
    logger.setLevel(logging.INFO)
    logger.handlers = []

    formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
    )

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if settings.ENV == "production" and settings.BETTERSTACK_API_KEY:
        betterstack_handler = BetterStackHandler()
        betterstack_handler.setFormatter(formatter)
        logger.addHandler(betterstack_handler)

    logger.info("✅ Logging system initialized")
