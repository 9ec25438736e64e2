# wellness_api/main.py
# FastAPI 앱 생성 및 라우터 설정
# 업스트림 클라이언트는 create_app에서 만들어 app.state에 올리고 Depends로 주입(테스트에서 교체 가능)

from __future__ import annotations
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from wellness_api.api.routes_coach import router as coach_router
from wellness_api.api.routes_recipes import router as recipes_router
from wellness_api.core.config import Settings, get_settings
from wellness_api.services.advice import AdviceClient
from wellness_api.services.mealdb import MealDBClient, build_http_client

log = logging.getLogger(__name__)

def create_app(
    settings: Optional[Settings] = None,
    recipe_client: Optional[MealDBClient] = None,
    advice_client: Optional[AdviceClient] = None,
) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title="Wellness Relay - API", version="0.1.0")
    app.state.settings = settings
    app.state.recipe_client = recipe_client or MealDBClient(
        build_http_client(settings.MEALDB_BASE_URL, settings.HTTP_TIMEOUT)
    )
    app.state.advice_client = advice_client or AdviceClient(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 오류 응답 형태는 {"error": "..."} 로 통일
    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    # JSON 아닌 바디/타입 불일치도 422 대신 400
    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        log.info("invalid request body on %s: %s", request.url.path, exc.errors())
        return JSONResponse(status_code=400, content={"error": "Solicitud inválida."})

    @app.on_event("startup")
    async def on_startup() -> None:
        log.info("[startup] listening on http://%s:%s", settings.HOST, settings.PORT)
        if not settings.GEMINI_API_KEY:
            log.warning("[startup] GEMINI_API_KEY not set; text generation routes will return 500")

    @app.on_event("shutdown")
    async def on_shutdown() -> None:
        # httpx/openai 커넥션 정리
        await app.state.recipe_client.aclose()
        await app.state.advice_client.aclose()

    @app.get("/")
    async def root():
        return {"status": "ok"}

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    app.include_router(coach_router)
    app.include_router(recipes_router)
    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn

    s = get_settings()
    uvicorn.run("wellness_api.main:app", host=s.HOST, port=s.PORT)
