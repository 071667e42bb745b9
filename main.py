from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import time
import logging

import uvicorn

from config import get_settings
from errors import GradebookError
from routes import students, teacher, export

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Student Grading API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    t0 = time.perf_counter()
    logger.info("REQUEST  %s %s", request.method, request.url.path)
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - t0) * 1000
    logger.info("RESPONSE %s %s: status: %d, time: %.1fms", request.method, request.url.path, response.status_code, elapsed_ms)
    return response


@app.exception_handler(GradebookError)
async def gradebook_error_handler(request: Request, exc: GradebookError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    message = "Invalid request body"
    errors = exc.errors()
    if errors:
        field = ".".join(str(part) for part in errors[0].get("loc", ()) if part != "body")
        if field and errors[0].get("type") == "missing":
            message = f"Missing field: {field}"
        elif field:
            message = f"Invalid value for {field}"
    logger.warning("%s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"error": message})


app.include_router(students.router, prefix="/api")
app.include_router(teacher.router, prefix="/api")
app.include_router(export.router, prefix="/api")


@app.get("/")
def root():
    return {"status": "ok", "message": "Student Grading API"}


if __name__ == "__main__":
    logger.info("Server running on http://%s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
