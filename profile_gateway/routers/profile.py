from fastapi import APIRouter, Depends

from profile_gateway.services.github import GitHubClient, UpstreamError, get_github_client
from profile_gateway.utils.repos import map_profile
from profile_gateway.utils.responses import upstream_error_response

router = APIRouter()


@router.get("/profile/{username}")
def profile(username: str, github: GitHubClient = Depends(get_github_client)):
    try:
        user = github.get_user(username)
    except UpstreamError as exc:
        return upstream_error_response(exc, "Failed to fetch profile data")
    return map_profile(user)
