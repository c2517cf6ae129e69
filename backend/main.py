from dotenv import load_dotenv
load_dotenv()

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import config
from replay.errors import ReplayError
from routes import clock, history
from store import get_event_store

logging.basicConfig(
    level=config.log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Build the fixture up front so the first poll never pays for it
    get_event_store()
    yield


app = FastAPI(title="Replay API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(history.router)
app.include_router(clock.router)


@app.exception_handler(ReplayError)
async def replay_error_handler(request: Request, exc: ReplayError):
    logger.info(
        "Rejected %s %s: %s (%s)",
        request.method, request.url.path, exc.message, type(exc).__name__,
    )
    return JSONResponse(status_code=400, content={"error": exc.message})


@app.get("/")
def health():
    return {"status": "ok", "service": "replay"}
