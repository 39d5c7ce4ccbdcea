import logging

from fastapi.responses import JSONResponse

from profile_gateway.services.github import UpstreamError

logger = logging.getLogger(__name__)


def upstream_error_response(exc: UpstreamError, message: str) -> JSONResponse:
    # el detalle de GitHub solo va al log, nunca al cliente
    logger.error("%s: upstream status=%s body=%s", message, exc.status, exc.body)
    return JSONResponse(status_code=exc.status or 500, content={"error": message})
