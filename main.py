from dotenv import load_dotenv, find_dotenv
load_dotenv(find_dotenv())  # carga .env antes de tocar settings

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from profile_gateway.core.config import Settings
from profile_gateway.core.log import configure_logging
from profile_gateway.services.github import GitHubClient
from profile_gateway.routers import health, profile, languages, repos, recommendations

logger = logging.getLogger(__name__)

API_PREFIX = "/api/github"


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()

    app = FastAPI(title="GitHub Profile Gateway")
    app.state.settings = settings
    app.state.github = GitHubClient.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.CORS_ORIGINS),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(profile.router, prefix=API_PREFIX, tags=["profile"])
    app.include_router(languages.router, prefix=API_PREFIX, tags=["languages"])
    app.include_router(repos.router, prefix=API_PREFIX, tags=["repos"])
    app.include_router(recommendations.router, prefix=API_PREFIX, tags=["recommendations"])

    logger.info(
        "gateway ready: upstream=%s token=%s fanout_workers=%d",
        settings.GITHUB_API,
        "set" if settings.GITHUB_TOKEN else "missing",
        settings.LANGUAGE_FANOUT_WORKERS,
    )
    return app


settings = Settings.from_env()
configure_logging(settings.LOG_LEVEL)
app = create_app(settings)

# uvicorn main:app --reload --port 5001
if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
