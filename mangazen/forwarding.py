import logging
from typing import Dict
from urllib.parse import quote

import httpx
from fastapi.responses import JSONResponse

from mangazen.routes import ForwardRoute
from mangazen.utils import count_items, error_details

logger = logging.getLogger(__name__)


class UpstreamStatusError(Exception):
    def __init__(self, status_code: int):
        super().__init__(f"API responded with status: {status_code}")
        self.status_code = status_code


def build_upstream_url(base_url: str, route: ForwardRoute, params: Dict[str, str]) -> str:
    encoded = {key: quote(value, safe="") for key, value in params.items()}
    return base_url.rstrip("/") + route.template.format(**encoded)


async def forward(
    client: httpx.AsyncClient,
    base_url: str,
    route: ForwardRoute,
    params: Dict[str, str],
) -> JSONResponse:
    """
    Issue the single upstream GET for ``route`` and relay its JSON body.

    Any failure (transport error, non-2xx status, undecodable body) becomes a
    500 carrying the route's message and the underlying error text.
    """
    try:
        url = build_upstream_url(base_url, route, params)
        if params:
            logger.info("%s: %s", route.log_label, ", ".join(params.values()))
        else:
            logger.info("%s", route.log_label)
        response = await client.get(url)
        if not response.is_success:
            raise UpstreamStatusError(response.status_code)
        data = response.json()
        logger.info("Found %d %s", count_items(data, route.count_path), route.item_noun)
        return JSONResponse(content=data)
    except Exception as e:
        logger.exception("%s", route.error_message)
        return JSONResponse(
            status_code=500,
            content={
                "error": route.error_message,
                "details": error_details(e),
            },
        )
