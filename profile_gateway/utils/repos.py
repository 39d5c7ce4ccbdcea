# profile_gateway/utils/repos.py
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterable, List

from profile_gateway.services.github import GitHubClient

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("name", "public_repos", "followers", "following", "avatar_url", "bio", "html_url", "created_at")


def map_profile(user: dict) -> dict:
    return {k: user.get(k) for k in PROFILE_FIELDS}


def map_repo(r: dict) -> dict:
    return {
        "name": r.get("name"),
        "stars": r.get("stargazers_count"),
        "forks": r.get("forks_count"),
        "watchers": r.get("watchers_count"),
        "language": r.get("language"),
        "updated_at": r.get("updated_at"),
        "html_url": r.get("html_url"),
    }


def sort_by_stars(summaries: List[dict]) -> List[dict]:
    # sorted() es estable: empates conservan el orden de GitHub
    return sorted(summaries, key=lambda s: s.get("stars") or 0, reverse=True)


def add_language_bytes(totals: Dict[str, int], langs: Dict[str, int]) -> Dict[str, int]:
    for lang, b in (langs or {}).items():
        totals[lang] = totals.get(lang, 0) + int(b)
    return totals


def merge_language_totals(per_repo: Iterable[Dict[str, int]]) -> Dict[str, int]:
    totals: Dict[str, int] = {}
    for langs in per_repo:
        add_language_bytes(totals, langs)
    return totals


def language_totals_for(github: GitHubClient, repos: List[dict], max_workers: int = 8) -> Dict[str, int]:
    """
    Suma los bytes por lenguaje de todos los repos, una llamada por repo.
    Las llamadas van en paralelo con tope `max_workers`; el primer UpstreamError
    cancela lo pendiente y se propaga (sin resultados parciales).
    """
    if not repos:
        return {}
    workers = max(1, min(max_workers, len(repos)))
    logger.debug("fetching languages for %d repos with %d workers", len(repos), workers)
    pool = ThreadPoolExecutor(max_workers=workers)
    try:
        futures = [pool.submit(github.get_languages, r) for r in repos]
        return merge_language_totals(f.result() for f in futures)
    finally:
        pool.shutdown(wait=False, cancel_futures=True)
