from concurrent.futures import ThreadPoolExecutor

from fastapi import APIRouter, Depends

from profile_gateway.services.github import GitHubClient, UpstreamError, get_github_client
from profile_gateway.utils.recommendations import build_recommendations
from profile_gateway.utils.responses import upstream_error_response

router = APIRouter()


@router.get("/recommendations/{username}")
def recommendations(username: str, github: GitHubClient = Depends(get_github_client)):
    # perfil y repos son independientes: se piden a la vez
    with ThreadPoolExecutor(max_workers=2) as pool:
        user_future = pool.submit(github.get_user, username)
        repos_future = pool.submit(github.list_repos, username)
        try:
            user = user_future.result()
            repos = repos_future.result()
        except UpstreamError as exc:
            return upstream_error_response(exc, "Failed to generate recommendations")
    return build_recommendations(username, user, repos)
