import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse

from app.core.config import settings
from app.core.errors import QuizActionError
from app.routes.quiz.option_routers import option_router
from app.routes.quiz.quiz_routers import quiz_router, result_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Personality Quiz API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(quiz_router)
app.include_router(option_router)
app.include_router(result_router)


@app.exception_handler(QuizActionError)
async def quiz_action_error_handler(request: Request, exc: QuizActionError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": {"code": exc.code, "message": exc.message}},
        headers=exc.headers,
    )


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/", response_class=HTMLResponse)
async def read_root():
    return """
    <html>
        <head>
            <title>Personality Quiz API</title>
        </head>
        <body>
            <h1>Personality Quiz API</h1>
            <p>See the API documentation <a href="/docs">here</a>.</p>
        </body>
    </html>
    """
