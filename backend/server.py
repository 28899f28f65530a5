from fastapi import FastAPI, APIRouter, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse
from dotenv import load_dotenv
from pydantic import ValidationError
from starlette.middleware.cors import CORSMiddleware
import os
import logging
from pathlib import Path
from typing import Optional

# Load env before other imports
ROOT_DIR = Path(__file__).parent
load_dotenv(ROOT_DIR / '.env')

from models import (
    SongRequest, SongBatch, ArrangementRequest, Arrangement, GenreResponse
)
from services.song_generator import generate_song_batch, generate_arrangement

FRONTEND_DIR = Path(os.environ.get('FRONTEND_DIR', ROOT_DIR.parent / 'frontend'))

# Create the main app
app = FastAPI(title="Songsmith API", version="1.0.0")

# Create a router with the /api prefix
api_router = APIRouter(prefix="/api")

# Configure logging
logging.basicConfig(
    level=os.environ.get('LOG_LEVEL', 'INFO').upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# ============== Error Handling ==============

@app.exception_handler(RequestValidationError)
async def invalid_request_handler(request: Request, exc: RequestValidationError):
    details = [
        {"loc": [str(part) for part in err.get("loc", ())], "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    logger.info(f"Rejected malformed request to {request.url.path}: {details}")
    return JSONResponse(status_code=400, content={"error": "Invalid request", "details": details})

# ============== Generation Routes ==============

def _run_generation(song_request: SongRequest) -> dict:
    result = generate_song_batch(
        genre=song_request.genre,
        duration=song_request.duration,
        prompt=song_request.prompt,
        count=song_request.count,
        seed=song_request.seed,
    )
    if not result["success"]:
        raise HTTPException(status_code=500, detail="Generation failed")
    return result

@api_router.post("/generate", response_model=SongBatch)
async def generate(song_request: Optional[SongRequest] = None):
    # An empty body falls back to the documented defaults
    return _run_generation(song_request or SongRequest())

@api_router.get("/generate", response_model=SongBatch)
async def generate_from_query(request: Request):
    try:
        song_request = SongRequest.model_validate(dict(request.query_params))
    except ValidationError as e:
        raise RequestValidationError(e.errors())
    return _run_generation(song_request)

@api_router.post("/arrangement", response_model=Arrangement, response_model_exclude_none=True)
async def arrangement(arrangement_request: ArrangementRequest):
    result = generate_arrangement(
        lyrics=arrangement_request.lyrics,
        seed=arrangement_request.seed,
        bpm=arrangement_request.bpm,
        include_cues=arrangement_request.include_cues,
    )
    if not result["success"]:
        raise HTTPException(status_code=500, detail="Generation failed")
    return result

# ============== Genre Routes ==============

@api_router.get("/genres", response_model=GenreResponse)
async def get_genres():
    return GenreResponse()

# ============== Health Check ==============

@api_router.get("/health")
async def health_check():
    return {"ok": True}

@app.get("/health")
async def root_health_check():
    return {"ok": True}

# Include the router
app.include_router(api_router)

app.add_middleware(
    CORSMiddleware,
    allow_credentials=True,
    allow_origins=os.environ.get('CORS_ORIGINS', '*').split(','),
    allow_methods=["*"],
    allow_headers=["*"],
)

# ============== Browser Demo ==============

@app.get("/{full_path:path}", include_in_schema=False)
async def serve_frontend(full_path: str):
    # Unknown API paths stay 404; every other path falls back to index.html
    if full_path == "api" or full_path.startswith("api/"):
        raise HTTPException(status_code=404, detail="Not Found")
    root = FRONTEND_DIR.resolve()
    if full_path:
        candidate = (root / full_path).resolve()
        if candidate.is_file() and root in candidate.parents:
            return FileResponse(candidate)
    index = root / "index.html"
    if not index.is_file():
        raise HTTPException(status_code=404, detail="Not Found")
    return FileResponse(index)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=os.environ.get('HOST', '0.0.0.0'),
        port=int(os.environ.get('PORT', '5000')),
    )
