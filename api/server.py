from __future__ import annotations

import logging
from fastapi import FastAPI

from api.routes import router
from utils.config import LOG_LEVEL

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = FastAPI(title="Purchase Plan API", version="0.1.0")
app.include_router(router, prefix="/api")


@app.get("/")
def index():
    return {"message": "Purchase Plan API", "docs": "/docs"}

# To run: uvicorn api.server:app --reload
