import os
from dataclasses import dataclass
from typing import Tuple


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "")
    try:
        return int(raw) if raw.strip() else default
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    GITHUB_TOKEN: str = ""
    GITHUB_API: str = "https://api.github.com"
    GITHUB_TIMEOUT: int = 20
    CORS_ORIGINS: Tuple[str, ...] = ("*",)
    LANGUAGE_FANOUT_WORKERS: int = 8
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 5001

    @classmethod
    def from_env(cls) -> "Settings":
        # leer una sola vez, después de load_dotenv()
        origins = tuple(o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip())
        return cls(
            GITHUB_TOKEN=os.getenv("GITHUB_TOKEN", ""),
            GITHUB_API=os.getenv("GITHUB_API", cls.GITHUB_API).rstrip("/"),
            GITHUB_TIMEOUT=max(1, _env_int("GITHUB_TIMEOUT", cls.GITHUB_TIMEOUT)),
            CORS_ORIGINS=origins or ("*",),
            LANGUAGE_FANOUT_WORKERS=max(1, _env_int("LANGUAGE_FANOUT_WORKERS", cls.LANGUAGE_FANOUT_WORKERS)),
            LOG_LEVEL=os.getenv("LOG_LEVEL", cls.LOG_LEVEL).upper(),
            HOST=os.getenv("HOST", cls.HOST),
            PORT=_env_int("PORT", cls.PORT),
        )
