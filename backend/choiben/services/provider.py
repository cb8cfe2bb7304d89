import logging
import requests
from ..core.config import settings

logger = logging.getLogger(__name__)

def ai_backend_post(path: str, payload: dict) -> dict:
    headers = {"Content-Type": "application/json"}
    if settings.API_SECRET_KEY:
        headers["Authorization"] = f"Bearer {settings.API_SECRET_KEY}"
    url = f"{settings.AI_BACKEND_URL.rstrip('/')}{path}"
    logger.debug("POST %s", url)
    r = requests.post(url, json=payload, headers=headers, timeout=settings.AI_TIMEOUT_SECONDS)
    r.raise_for_status()
    return r.json()
