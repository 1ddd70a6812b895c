from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from fastapi import HTTPException, Request


class ParamSource(str, Enum):
    NONE = "none"
    QUERY = "query"
    PATH = "path"


@dataclass(frozen=True)
class ForwardRoute:
    """One inbound API path mapped onto one upstream GET.

    ``template`` is relative to the upstream base URL and may hold a single
    ``{param}`` placeholder, filled with the percent-encoded value taken from
    the inbound request.
    """

    name: str
    path: str
    template: str
    error_message: str
    log_label: str
    param: Optional[str] = None
    source: ParamSource = ParamSource.NONE
    count_path: Tuple[str, ...] = ("data",)
    item_noun: str = "items"

    def extract(self, request: Request) -> Dict[str, str]:
        if self.source is ParamSource.NONE:
            return {}
        if self.source is ParamSource.PATH:
            return {self.param: request.path_params[self.param]}
        value = request.query_params.get(self.param)
        if not value:
            raise HTTPException(status_code=400, detail="Query parameter required")
        return {self.param: value}


CATALOG_SUFFIX = "includes[]=cover_art&contentRating[]=safe"

FORWARD_ROUTES: List[ForwardRoute] = [
    ForwardRoute(
        name="popular",
        path="/api/manga/popular",
        template=f"/manga?limit=24&order[followedCount]=desc&{CATALOG_SUFFIX}",
        error_message="Failed to fetch popular manga",
        log_label="Fetching popular manga",
        item_noun="popular manga",
    ),
    ForwardRoute(
        name="latest",
        path="/api/manga/latest",
        template=f"/manga?limit=24&order[latestUploadedChapter]=desc&{CATALOG_SUFFIX}",
        error_message="Failed to fetch latest manga",
        log_label="Fetching latest manga",
        item_noun="latest manga",
    ),
    ForwardRoute(
        name="search",
        path="/api/manga/search",
        template=f"/manga?limit=24&title={{q}}&{CATALOG_SUFFIX}",
        error_message="Failed to search manga",
        log_label="Searching manga",
        param="q",
        source=ParamSource.QUERY,
        item_noun="search results",
    ),
    ForwardRoute(
        name="chapters",
        path="/api/manga/{id}/chapters",
        template="/manga/{id}/feed?limit=50&order[chapter]=desc&translatedLanguage[]=en",
        error_message="Failed to fetch chapters",
        log_label="Fetching chapters for manga",
        param="id",
        source=ParamSource.PATH,
        item_noun="chapters",
    ),
    ForwardRoute(
        name="pages",
        path="/api/chapter/{id}",
        template="/at-home/server/{id}",
        error_message="Failed to fetch chapter pages",
        log_label="Fetching pages for chapter",
        param="id",
        source=ParamSource.PATH,
        count_path=("chapter", "data"),
        item_noun="pages",
    ),
]
