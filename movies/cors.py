import logging
from typing import Iterable, List, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

ALLOWED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


class CorsPolicy:
    def __init__(self, allowed_origins: Iterable[str]):
        # browsers never send a trailing slash in Origin
        self.allowed_origins: List[str] = sorted({origin.rstrip("/") for origin in allowed_origins})

    def is_allowed(self, origin: Optional[str]) -> bool:
        # no Origin header means a same-origin or non-browser caller
        if not origin:
            return True
        return origin.rstrip("/") in self.allowed_origins


def install_cors(app: FastAPI, policy: CorsPolicy, strict: bool = True) -> None:
    """Register CORS handling on ``app``.

    CORSMiddleware reflects allowed origins and answers preflight requests.
    With ``strict`` on, requests from other origins are rejected with 403
    before they reach it.
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=policy.allowed_origins,
        allow_methods=ALLOWED_METHODS,
        allow_headers=["*"],
    )

    # added last, so it runs in front of CORSMiddleware
    @app.middleware("http")
    async def reject_disallowed_origin(request: Request, call_next):
        origin = request.headers.get("origin")
        if policy.is_allowed(origin):
            return await call_next(request)

        logger.warning(f"Request from origin {origin} is not allowed by CORS")
        if strict:
            return JSONResponse(status_code=403, content={"message": "Not allowed by CORS"})
        return await call_next(request)
