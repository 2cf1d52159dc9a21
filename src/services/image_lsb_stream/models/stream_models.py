from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, Field


class StreamState(str, Enum):
    CONSTRUCTING = "constructing"
    STREAMING = "streaming"
    CLOSED = "closed"


class StreamConfig(BaseModel):
    max_bits_per_channel: int = Field(default=3, ge=1, le=8, description="Upper bound on bits used per channel (1-8)")
    use_compression: bool = Field(default=False, description="Payload was compressed before embedding")
    use_encryption: bool = Field(default=False, description="Payload was encrypted before embedding")


class StegoHeader(BaseModel):
    payload_length: int = Field(ge=0)
    bits_per_channel: int = Field(ge=1, le=8)
    compressed: bool = False
    encrypted: bool = False


class StegoOptions(BaseModel):
    max_bits_per_channel: int = Field(default=3, ge=1, le=8, description="Upper bound on bits used per channel (1-8)")
    password: Optional[str] = None
    compress: bool = Field(default=True, description="Whether to compress payload before embedding")
    output_filename: Optional[str] = None


class StegoCapacityResult(BaseModel):
    width: int
    height: int
    header_size_bytes: int
    max_bits_per_channel: int
    max_payload_bytes: int
    payload_bytes_per_depth: Dict[int, int] = Field(default_factory=dict, description="Max payload bytes at each depth")


class StegoHideResult(BaseModel):
    output_path: Path
    payload_size_bytes: int
    overhead_bytes: int
    bits_per_channel: int
    encrypted: bool = False
    encryption: Optional[str] = None
    kdf: Optional[str] = None
    compression: Optional[str] = None
    compression_ratio: Optional[float] = None


class StegoRevealResult(BaseModel):
    data: bytes
    size_bytes: int
    bits_per_channel: int
    was_compressed: bool = False
    was_encrypted: bool = False
