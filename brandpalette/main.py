# brandpalette/main.py
import logging
import random

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from .config import settings
from .engine import PaletteEngine
from .industries import list_industries
from .schemas import GenerateRequest
from .tones import list_tones

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.PROJECT_NAME)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    message = first.get("msg", "Invalid request")
    return JSONResponse(content={"error": f"{field}: {message}" if field else message}, status_code=400)


@app.post("/api/generate")
def generate(req: GenerateRequest):
    """
    Generate three brand palettes. When the caller omits a seed one is drawn
    here and echoed back in `input.seed` so the result can be reproduced.
    """
    seed = req.seed if req.seed is not None else random.randint(0, settings.MAX_RANDOM_SEED)
    data = req.to_input(seed)
    try:
        response = PaletteEngine().generate(data)
        return JSONResponse(content=response.to_dict())
    except Exception as e:
        logger.exception(f"Palette generation failed for industry={data.industry!r} seed={seed}")
        body = {"error": "Failed to generate palettes"}
        if settings.DEBUG:
            body["message"] = str(e)
        return JSONResponse(content=body, status_code=500)


@app.get("/api/industries")
async def get_industries():
    """Industries for autocomplete; anything else falls back to technology."""
    return JSONResponse(content={"industries": list_industries()})


@app.get("/api/tones")
async def get_tones():
    return JSONResponse(content={"tones": list_tones()})


@app.get("/health")
def health_check():
    return {"status": "healthy", "project": settings.PROJECT_NAME}


def run():
    uvicorn.run("brandpalette.main:app", host=settings.HOST, port=settings.PORT,
                log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
