from fastapi import APIRouter, Depends

from profile_gateway.services.github import GitHubClient, UpstreamError, get_github_client
from profile_gateway.utils.repos import map_repo, sort_by_stars
from profile_gateway.utils.responses import upstream_error_response

router = APIRouter()


@router.get("/repos/{username}")
def repositories(username: str, github: GitHubClient = Depends(get_github_client)):
    try:
        repos = github.list_repos(username)
    except UpstreamError as exc:
        return upstream_error_response(exc, "Failed to fetch repositories")
    return sort_by_stars([map_repo(r) for r in repos])
