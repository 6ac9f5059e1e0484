"""
WoW collection guide HTTP API.

FastAPI application exposing guide generation and input validation to the
browser client. Run with ``python -m wow_guide.server`` or the
``wow-guide-server`` entry point.
"""

import logging
import sys

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wow_guide.config import Settings, get_settings
from wow_guide.exceptions import ConfigurationError, GenerationError, InvalidRequestError
from wow_guide.llm import GuideGenerator
from wow_guide.models import VALID_CATEGORIES, GuideRequestBody, ValidateRequestBody
from wow_guide.service import GuideService, validate_guide_request

log = logging.getLogger(__name__)

_APP_NAME = "WoW Collection Helper"
_GENERATION_FAILED_MESSAGE = "Failed to generate guide. Please try again later."
_VALIDATION_FAILED_MESSAGE = "Failed to validate input. Please try again later."

API_DESCRIPTION = {
    "name": _APP_NAME,
    "description": "Step-by-step acquisition guides for World of Warcraft collectibles",
    "endpoints": {
        "POST /api/guide": {
            "body": {"type": " | ".join(VALID_CATEGORIES), "input": "name or Wowhead URL"},
            "returns": "type, input, guide, metadata",
        },
        "POST /api/validate": {
            "body": {"input": "name or Wowhead URL", "type": "optional category"},
            "returns": "enrichment preview without generating a guide",
        },
        "GET /health": {"returns": "service status and configured model"},
    },
}


def _service(request: Request) -> GuideService:
    return request.app.state.guide_service


def create_app(settings: Settings, generator: GuideGenerator | None = None) -> FastAPI:
    if generator is None:
        generator = GuideGenerator.from_settings(settings)

    app = FastAPI(title=_APP_NAME)
    app.state.guide_service = GuideService(generator, language=settings.guide_language)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        log.warning("Malformed request body for %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Malformed request body"},
        )

    @app.get("/")
    def api_description():
        return API_DESCRIPTION

    @app.get("/health")
    def health(request: Request):
        return {"status": "OK", "model": _service(request).model}

    @app.post("/api/guide")
    def create_guide(body: GuideRequestBody, request: Request):
        try:
            guide_request = validate_guide_request(body.type, body.input)
        except InvalidRequestError as e:
            return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(e)})

        try:
            result = _service(request).create_guide(guide_request)
        except GenerationError as e:
            log.error("Guide generation failed for '%s': %s", guide_request.raw_input, e)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": _GENERATION_FAILED_MESSAGE},
            )
        except Exception:
            log.exception("Unexpected error generating guide for '%s'", guide_request.raw_input)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": _GENERATION_FAILED_MESSAGE},
            )

        return result.model_dump(by_alias=True, mode="json")

    @app.post("/api/validate")
    def validate_input(body: ValidateRequestBody, request: Request):
        if not body.input or not body.input.strip():
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"valid": False, "message": "Missing required field: input"},
            )

        try:
            preview = _service(request).preview(body.input.strip(), body.type)
        except Exception:
            log.exception("Validation preview failed for '%s'", body.input)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"valid": False, "message": _VALIDATION_FAILED_MESSAGE},
            )

        return preview.model_dump(by_alias=True, mode="json")

    return app


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        app = create_app(settings)
    except ConfigurationError as e:
        log.error("Refusing to start: %s", e)
        sys.exit(1)

    log.info(
        "%s listening on http://%s:%d (model=%s)",
        _APP_NAME,
        settings.host,
        settings.port,
        settings.model,
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
