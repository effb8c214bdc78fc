# main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from suggest_skills.api.routes.health import router as health_router
from suggest_skills.api.routes.skills import router as skills_router
from suggest_skills.config import Settings, get_settings
from suggest_skills.errors import SkillSuggestionError
from suggest_skills.services.ai_client import SkillModelClient
from suggest_skills.services.skill_suggester import build_suggester


logger = logging.getLogger(__name__)


def _register_error_handlers(application: FastAPI) -> None:
    @application.exception_handler(SkillSuggestionError)
    async def _suggestion_error(_request: Request, exc: SkillSuggestionError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @application.exception_handler(RequestValidationError)
    async def _validation_error(_request: Request, exc: RequestValidationError) -> JSONResponse:
        details = [{"loc": list(err.get("loc", ())), "msg": err.get("msg", "")} for err in exc.errors()]
        return JSONResponse(status_code=400, content={"error": "invalid request body", "details": details})

    @application.exception_handler(StarletteHTTPException)
    async def _http_error(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == 404:
            return JSONResponse(status_code=404, content={"error": "Not Found"})
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)}, headers=exc.headers)

    @application.exception_handler(Exception)
    async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("unhandled.error path=%s", request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


def create_app(settings: Settings | None = None, client: SkillModelClient | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Settings, lexicon and AI client are built once; request handlers only read them.
        # In strict credential mode a missing GEMINI_API_KEY aborts startup here.
        app.state.suggester = build_suggester(settings, client)
        yield

    application = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    application.state.settings = settings
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    _register_error_handlers(application)

    application.include_router(health_router)
    application.include_router(skills_router, prefix="/api")
    return application


app = create_app()
