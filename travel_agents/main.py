"""
HTTP service for the travel agents.

Wires logging, CORS and the itinerary router into one FastAPI app.
"""

import os

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from travel_agents.api.itineraries import router as itineraries_router
from travel_agents.shared.logging.config import configure_logging


load_dotenv()

# Root logging is configured here and nowhere else
configure_logging(
    level=os.getenv("LOG_LEVEL", "INFO"),
    json_format=os.getenv("LOG_FORMAT", "").lower() == "json",
    log_file=os.getenv("LOG_FILE") or None,
)


def _allowed_origins():
    raw = os.getenv("CORS_ALLOWED_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()] or ["*"]


app = FastAPI(
    title="Travel Agents",
    description="Multi-agent travel itinerary planning built with LangGraph",
    version="0.1.0",
)

# Origins come from CORS_ALLOWED_ORIGINS
app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(itineraries_router)


@app.get("/")
async def root():
    """Service name, version and the operations it exposes."""
    return {
        "name": "Travel Agents",
        "version": "0.1.0",
        "endpoints": {
            "questions": "/api/itineraries/questions",
            "itineraries": "/api/itineraries",
        },
        "agents": ["flight", "hotel", "transport", "event", "weather", "question", "planner"],
    }


@app.get("/health")
async def health():
    """Liveness probe."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
