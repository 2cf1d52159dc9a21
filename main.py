from __future__ import annotations

import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from src.services.image_lsb_stream.main import router as stego_router
from src.utility.constants_manager import ConstantsManager

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


app = FastAPI(title="Image Lab - LSB Stream", version="1.0.0")

# Ensure output directories exist
output_dir = ConstantsManager().get_output_dir()
os.makedirs(os.path.join(output_dir, "embedded"), exist_ok=True)
os.makedirs(os.path.join(output_dir, "recovered"), exist_ok=True)

app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.mount("/files", StaticFiles(directory=os.path.join(output_dir, "embedded")), name="stego")
app.mount("/recovered", StaticFiles(directory=os.path.join(output_dir, "recovered")), name="recovered")

app.include_router(stego_router)


@app.get("/health")
async def health():
    return {"status": "ok"}

