"""Chapter Scanner API -- FastAPI entry point."""

from pathlib import Path

# Load .env BEFORE importing routes so probe settings see it
from dotenv import load_dotenv
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chapterlib import __version__
from server.routes import chapters

app = FastAPI(title="Chapter Scanner API", version=__version__)

# CORS -- the player UI runs in a webview or dev server on another origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Error-Kind"],
)

# API routes
app.include_router(chapters.router)


@app.get("/api/health")
async def health() -> dict:
    return {"status": "ok"}
