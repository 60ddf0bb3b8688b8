"""FastAPI application for the share-link service.

Run:
    uv run uvicorn api.sharelink.app:app --reload --port 8000
"""

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI

from api.sharelink.routes import router

app = FastAPI(title="Share-Link Service")

# GET /share/, POST /api/sharelink, POST /api/sharelink/upgrade
app.include_router(router)
