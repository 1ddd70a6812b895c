import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    port: int = 3000
    host: str = "0.0.0.0"
    upstream_url: str = "https://api.mangadex.org"
    static_dir: str = "public"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            port=int(os.environ.get("PORT", 3000)),
            host=os.environ.get("HOST", "0.0.0.0"),
            upstream_url=os.environ.get("MANGAZEN_UPSTREAM_URL", "https://api.mangadex.org").rstrip("/"),
            static_dir=os.environ.get("MANGAZEN_STATIC_DIR", "public"),
            log_level=os.environ.get("MANGAZEN_LOG_LEVEL", "INFO").upper(),
        )
