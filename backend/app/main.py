import os
from pathlib import Path

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.responses import FileResponse

from mentor.config import ResolverConfig
from mentor.registry import build_backend
from mentor.resolver import MissingInputError, NoCredentialError

from .database import Base, engine
from .dependencies import get_resolver_config
from .router_feedback import router as feedback_router
from .router_users import router as users_router

Base.metadata.create_all(bind=engine)

app = FastAPI(title="Campus Goal Feedback", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173", "http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(MissingInputError)
async def missing_input_handler(request: Request, exc: MissingInputError):
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(NoCredentialError)
async def no_credential_handler(request: Request, exc: NoCredentialError):
    return JSONResponse(status_code=400, content={"error": str(exc)})


app.include_router(feedback_router)
app.include_router(users_router)


_PROVIDER_STATE = {True: "connected", False: "disconnected", None: "unchecked"}


@app.get("/api/health")
def health_check(config: ResolverConfig = Depends(get_resolver_config)):
    # Rule-based feedback needs no provider, so a dead provider only degrades the service.
    reachable = build_backend(config).check_reachable()
    return {
        "status": "degraded" if reachable is False else "ok",
        "backend": config.backend,
        "provider": _PROVIDER_STATE[reachable],
        "models": list(config.models),
        "fallback": "available",
    }


def mount_spa(target: FastAPI, static_path: Path) -> None:
    """Serve the built dashboard from *static_path*, falling back to index.html."""
    target.mount("/assets", StaticFiles(directory=static_path / "assets"), name="assets")

    # Catch-all: serve index.html for any non-API route (SPA client-side routing)
    @target.get("/{full_path:path}")
    def serve_spa(full_path: str):
        file = (static_path / full_path).resolve()
        if file.is_file() and file.is_relative_to(static_path.resolve()):
            return FileResponse(file)
        return FileResponse(static_path / "index.html")


# In production, serve the built dashboard as static files.
# The deploy script sets CAMPUS_DASHBOARD_STATIC to the frontend dist directory.
_static_dir = os.environ.get("CAMPUS_DASHBOARD_STATIC")
if _static_dir:
    mount_spa(app, Path(_static_dir))
