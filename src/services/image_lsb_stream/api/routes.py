"""
API routes for the adaptive LSB steganography service
"""

import logging
import uuid
from io import BytesIO
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, File, Form, UploadFile
from fastapi.responses import JSONResponse
from PIL import Image

from src.utility.constants_manager import ConstantsManager

from ..core.errors import InsufficientCapacityError, StegoStreamError
from ..core.service import ImageStreamStegoService
from ..models.stream_models import StegoCapacityResult, StegoOptions
from ..utils.image_utils import load_image_from_input
from .responses import StegoAPIResult


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/stego", tags=["stego"])

# Service instance
stego_service = ImageStreamStegoService()
constants = ConstantsManager()


def send_response(
    status_code: int,
    message: str,
    path: Optional[str] = None,
    details: Optional[dict] = None
) -> JSONResponse:
    """
    Helper function to send consistent API responses
    """
    return JSONResponse(
        status_code=status_code,
        content=StegoAPIResult(
            success=status_code < 400,
            message=message,
            path=path,
            details=details
        ).model_dump()
    )


def error_response(e: Exception) -> JSONResponse:
    if isinstance(e, InsufficientCapacityError):
        return send_response(413, str(e), details={"kind": e.kind.value, "required": e.required, "available": e.available})
    if isinstance(e, StegoStreamError):
        return send_response(400, str(e), details={"kind": e.kind.value})
    if "Invalid password" in str(e) or "password is required" in str(e):
        return send_response(401, str(e))
    return send_response(400, str(e))


def _output_dir(name: str) -> Path:
    path = Path(constants.get_output_dir()) / name
    path.mkdir(parents=True, exist_ok=True)
    return path


async def _load_cover(file: Optional[UploadFile], url: Optional[str]) -> Image.Image:
    if file is not None:
        return load_image_from_input(file=BytesIO(await file.read()))
    return load_image_from_input(url=url)


async def _hide(cover_img: Image.Image, data: bytes, options: StegoOptions, label: str) -> JSONResponse:
    stego_img, result = stego_service.hide(cover_img, data, options)

    output_path = _output_dir("embedded") / Path(options.output_filename or f"stego_{uuid.uuid4().hex}.png").name
    stego_img.save(output_path, "PNG")

    return send_response(
        200,
        f"{label} hidden successfully using {result.bits_per_channel} bits per channel",
        str(output_path),
        {
            "payload_size_bytes": result.payload_size_bytes,
            "overhead_bytes": result.overhead_bytes,
            "encrypted": result.encrypted,
            "compressed": result.compression is not None,
            "compression_ratio": result.compression_ratio,
            "bits_per_channel": result.bits_per_channel,
        }
    )


@router.post("/capacity", response_model=StegoCapacityResult)
async def check_capacity(
    file: Optional[UploadFile] = File(None),
    url: Optional[str] = Form(None),
    max_bits_per_channel: Optional[int] = Form(None),
):
    """
    Report how many payload bytes an image can carry at each depth
    """
    try:
        img = await _load_cover(file, url)
        return stego_service.capacity(img, max_bits_per_channel or constants.get_max_bits_per_channel())
    except Exception as e:
        logger.error(f"Error calculating capacity: {str(e)}")
        return send_response(400, str(e))


@router.post("/hide-text", response_model=StegoAPIResult)
async def hide_text(
    file: Optional[UploadFile] = File(None),
    url: Optional[str] = Form(None),
    text: str = Form(...),
    password: Optional[str] = Form(None),
    max_bits_per_channel: Optional[int] = Form(None),
    compress: bool = Form(True),
    output_filename: Optional[str] = Form(None),
):
    """
    Hide text in an image
    """
    try:
        options = StegoOptions(
            max_bits_per_channel=max_bits_per_channel or constants.get_max_bits_per_channel(),
            password=password,
            compress=compress,
            output_filename=output_filename,
        )
        logger.info(f"Received hide-text request: source={file.filename if file else url}, text_len={len(text)}, encrypted={bool(password)}")
        return await _hide(await _load_cover(file, url), text.encode("utf-8"), options, "Text")
    except Exception as e:
        logger.error(f"Error in hide-text: {str(e)}")
        return error_response(e)


@router.post("/hide-file", response_model=StegoAPIResult)
async def hide_file(
    cover: UploadFile = File(...),
    secret: UploadFile = File(...),
    password: Optional[str] = Form(None),
    max_bits_per_channel: Optional[int] = Form(None),
    compress: bool = Form(True),
    output_filename: Optional[str] = Form(None),
):
    """
    Hide a file in an image
    """
    try:
        options = StegoOptions(
            max_bits_per_channel=max_bits_per_channel or constants.get_max_bits_per_channel(),
            password=password,
            compress=compress,
            output_filename=output_filename,
        )
        logger.info(f"Received hide-file request: cover={cover.filename}, secret={secret.filename}")
        cover_img = await _load_cover(cover, None)
        return await _hide(cover_img, await secret.read(), options, f"File '{secret.filename}'")
    except Exception as e:
        logger.error(f"Error in hide-file: {str(e)}")
        return error_response(e)


@router.post("/reveal-text", response_model=StegoAPIResult)
async def reveal_text(
    file: UploadFile = File(...),
    password: Optional[str] = Form(None),
):
    """
    Reveal hidden text from a stego image
    """
    try:
        img = Image.open(BytesIO(await file.read()))
        result = stego_service.reveal(img, password)
        return send_response(
            200,
            f"Text revealed successfully from {result.bits_per_channel} bits per channel",
            None,
            {
                "text": result.data.decode("utf-8", errors="replace"),
                "was_compressed": result.was_compressed,
                "was_encrypted": result.was_encrypted,
                "bits_per_channel": result.bits_per_channel,
            }
        )
    except Exception as e:
        logger.warning(f"Error in reveal-text: {str(e)}")
        return error_response(e)


@router.post("/reveal-file", response_model=StegoAPIResult)
async def reveal_file(
    file: UploadFile = File(...),
    password: Optional[str] = Form(None),
    filename: Optional[str] = Form(None),
):
    """
    Reveal hidden data from a stego image and store it as a file
    """
    try:
        img = Image.open(BytesIO(await file.read()))
        result = stego_service.reveal(img, password)

        output_path = _output_dir("recovered") / Path(filename or f"recovered_{uuid.uuid4().hex}.bin").name
        output_path.write_bytes(result.data)

        return send_response(
            200,
            f"File revealed successfully from {result.bits_per_channel} bits per channel",
            str(output_path),
            {
                "size_bytes": result.size_bytes,
                "was_compressed": result.was_compressed,
                "was_encrypted": result.was_encrypted,
                "bits_per_channel": result.bits_per_channel,
            }
        )
    except Exception as e:
        logger.warning(f"Error in reveal-file: {str(e)}")
        return error_response(e)
