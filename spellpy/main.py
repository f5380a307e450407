"""Main module for the FastAPI application."""
import json
from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI, HTTPException, status
from .config import settings
from .models import DistanceRequest, DistanceResponse, SuggestRequest, SuggestResponse
from .search.spell_service import SpellService
from .logger import logger


# Instance principale du service (remplaçable dans les tests via `main.service`)
service: SpellService = SpellService()


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Handle FastAPI startup and shutdown events."""
    logger.info(
        "Starting up SpellPy API (default max distance: {max_distance})...",
        max_distance=settings.DEFAULT_MAX_DISTANCE,
    )
    yield
    logger.info("Shutting down SpellPy API...")


app = FastAPI(
    title="SpellPy - Bounded Edit Distance Service",
    lifespan=lifespan
)


def get_service() -> SpellService:
    """Dépendance FastAPI pour obtenir l'instance du service."""
    return service


@app.post("/distance", response_model=DistanceResponse)
def distance(req: DistanceRequest, svc: SpellService = Depends(get_service)):
    """POST /distance : distance bornée entre une cible et un candidat."""
    logger.info("Received distance request: {request_body}", request_body=req.model_dump())
    try:
        return svc.distance(req.target, req.candidate, req.max_distance)
    except Exception as e:
        logger.exception("Error processing distance request")
        raise HTTPException(status_code=500, detail={"error": str(e)}) from e


@app.post("/suggest", response_model=SuggestResponse)
def suggest(req: SuggestRequest, svc: SpellService = Depends(get_service)):
    """POST /suggest : meilleure correction de `word` dans `dictionary`."""
    pretty_request_body = json.dumps(
        {"word": req.word, "dictionary_size": len(req.dictionary),
         "max_distance": req.max_distance, "limit": req.limit},
        indent=2, ensure_ascii=False,
    )
    logger.info("Received suggest request:\n{request_body}", request_body=pretty_request_body)
    try:
        return svc.suggest(req.word, req.dictionary, req.max_distance, req.limit)
    except Exception as e:
        logger.exception("Error processing suggest request")
        raise HTTPException(status_code=500, detail={"error": str(e)}) from e


@app.get("/")
def root():
    """Root endpoint to check API status."""
    return {"status": "ok", "message": "SpellPy API is running 🚀"}


@app.get("/health", status_code=status.HTTP_200_OK, tags=["Monitoring"])
def health_check(svc: SpellService = Depends(get_service)):
    """
    Health check endpoint.

    Vérifie que le calcul de distance répond (une transposition vaut 1).
    Returns 200 OK si c'est le cas, sinon 503 Service Unavailable.
    """
    services_status = {"editdistance": "ok"}
    if svc.distance("ab", "ba", 1).distance != 1:
        services_status["editdistance"] = "error"
        logger.error("Health check failed: unexpected edit distance.")
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=services_status)
    return services_status
