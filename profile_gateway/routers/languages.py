from fastapi import APIRouter, Depends, Request

from profile_gateway.services.github import GitHubClient, UpstreamError, get_github_client
from profile_gateway.utils.repos import language_totals_for
from profile_gateway.utils.responses import upstream_error_response

router = APIRouter()


@router.get("/languages/{username}")
def languages_mix(username: str, request: Request, github: GitHubClient = Depends(get_github_client)):
    workers = request.app.state.settings.LANGUAGE_FANOUT_WORKERS
    try:
        repos = github.list_repos(username)
        totals = language_totals_for(github, repos, max_workers=workers)
    except UpstreamError as exc:
        return upstream_error_response(exc, "Failed to fetch language data")
    return totals
