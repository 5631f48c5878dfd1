import argparse
import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, Response
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from newsdesk.config import Settings, get_settings
from newsdesk.exceptions import ParamParseError, RenderError, UpstreamFailure
from newsdesk.routers.search import router as search_router

logger = logging.getLogger(__name__)


# --- Exception handlers ---

async def param_parse_error_handler(request: Request, exc: ParamParseError):
    logger.info("Rejected %s: %s", request.url.path, exc)
    return PlainTextResponse("Unexpected server error", status_code=500)


async def upstream_failure_handler(request: Request, exc: UpstreamFailure):
    return Response(status_code=500)


async def render_error_handler(request: Request, exc: RenderError):
    return Response(status_code=500)


# --- FastAPI app ---

def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the app. Settings and the template environment are fixed for its lifetime."""
    settings = settings or get_settings()
    app = FastAPI(title="Newsdesk", version="0.1.0")
    app.state.settings = settings
    app.state.templates = Jinja2Templates(directory=str(settings.templates_dir))

    app.include_router(search_router)
    app.mount("/assets", StaticFiles(directory=str(settings.assets_dir)), name="assets")

    app.add_exception_handler(ParamParseError, param_parse_error_handler)
    app.add_exception_handler(UpstreamFailure, upstream_failure_handler)
    app.add_exception_handler(RenderError, render_error_handler)
    return app


def run(argv: list[str] | None = None):
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="newsdesk")
    parser.add_argument("-apikey", "--apikey", dest="apikey", default=settings.news_api_key, help="Newsapi.org access key")
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level.upper())
    if not args.apikey:
        logger.critical("apiKey must be set")
        raise SystemExit("apiKey must be set")

    settings = settings.model_copy(update={"news_api_key": args.apikey})
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
