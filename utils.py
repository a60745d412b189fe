import logging
from typing import Mapping

import requests

from boxoffice.errors import NetworkError
from crawler_config import REQUEST_HEADERS, REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


def fetch_html(url: str, form: Mapping[str, str], timeout: float = REQUEST_TIMEOUT) -> str:
    """以表单方式 POST 到 url，返回 HTML 文本"""
    logger.info("POST %s %s", url, dict(form))
    try:
        resp = requests.post(url, data=dict(form), headers=REQUEST_HEADERS, timeout=timeout)
        resp.raise_for_status()  # raise exception when receive error code
    except requests.RequestException as e:
        raise NetworkError(f"request to {url} failed: {e}") from e

    # KOBIS 页面都是 utf-8
    resp.encoding = "utf-8"
    return resp.text
