import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

import requests
from requests.utils import quote
from fastapi import Request

from profile_gateway.core.config import Settings

logger = logging.getLogger(__name__)


def _segment(value: Any) -> str:
    # un solo segmento de path: sin "/", "?" ni "." / ".." que se normalicen
    encoded = quote(str(value), safe="")
    return encoded.replace(".", "%2E") if encoded in (".", "..") else encoded


class UpstreamError(Exception):
    """Fallo de una llamada a GitHub. `status` es None si no hubo respuesta HTTP."""

    def __init__(self, status: Optional[int], body: Any):
        super().__init__(f"GitHub upstream error: {status} {body}")
        self.status = status
        self.body = body


@dataclass(frozen=True)
class GitHubClient:
    base_url: str
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    timeout: float = 20

    @classmethod
    def from_settings(cls, settings: Settings) -> "GitHubClient":
        headers = {"Accept": "application/vnd.github.v3+json"}
        if settings.GITHUB_TOKEN:
            headers["Authorization"] = f"Bearer {settings.GITHUB_TOKEN}"
        else:
            logger.warning("GITHUB_TOKEN not set; upstream calls are unauthenticated")
        return cls(
            base_url=settings.GITHUB_API.rstrip("/"),
            headers=MappingProxyType(headers),
            timeout=settings.GITHUB_TIMEOUT,
        )

    def gh_get(self, path: str, params: dict | None = None) -> Any:
        # languages_url viene absoluta desde GitHub
        url = path if path.startswith(("http://", "https://")) else f"{self.base_url}{path}"
        try:
            r = requests.get(url, headers=dict(self.headers), params=params or {}, timeout=self.timeout)
        except requests.RequestException as exc:
            raise UpstreamError(None, str(exc)) from exc
        if r.status_code >= 400:
            raise UpstreamError(r.status_code, r.text)
        try:
            return r.json()
        except ValueError as exc:
            raise UpstreamError(None, f"invalid JSON from {url}: {r.text[:200]}") from exc

    def get_user(self, username: str) -> Dict[str, Any]:
        data = self.gh_get(f"/users/{_segment(username)}")
        if not isinstance(data, dict):
            raise UpstreamError(None, f"unexpected user payload: {type(data).__name__}")
        return data

    def list_repos(self, username: str) -> List[Dict[str, Any]]:
        data = self.gh_get(f"/users/{_segment(username)}/repos")
        if not isinstance(data, list):
            raise UpstreamError(None, f"unexpected repos payload: {type(data).__name__}")
        if any(not isinstance(r, dict) for r in data):
            raise UpstreamError(None, "unexpected item in repos payload")
        return data

    def get_languages(self, repo: Dict[str, Any]) -> Dict[str, int]:
        url = repo.get("languages_url")
        if not url:
            owner = (repo.get("owner") or {}).get("login")
            url = f"/repos/{_segment(owner)}/{_segment(repo.get('name'))}/languages"
        data = self.gh_get(url)
        if not isinstance(data, dict):
            raise UpstreamError(None, f"unexpected languages payload: {type(data).__name__}")
        # bool es subclase de int
        if any(not isinstance(b, int) or isinstance(b, bool) for b in data.values()):
            raise UpstreamError(None, "non-integer byte count in languages payload")
        return data


def get_github_client(request: Request) -> GitHubClient:
    return request.app.state.github
