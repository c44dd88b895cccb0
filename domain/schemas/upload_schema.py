from typing import Optional, Set

from pydantic import BaseModel, Field, model_validator

from core.config import ALLOWED_FILE_TYPES_SET, MAX_FILE_SIZE, MAX_IMAGE_SIZE, UPLOAD_DIR
from domain.errors import UploadErrorKind, UploadFailed


class FileUploadRequest(BaseModel):
    base_dir: str = UPLOAD_DIR  # Ej: "content/documents"
    allowed_types: Set[str] = Field(default_factory=lambda: set(ALLOWED_FILE_TYPES_SET))
    max_size: int = MAX_FILE_SIZE  # En bytes


class ImageUploadRequest(BaseModel):
    base_dir: str = UPLOAD_DIR  # Ej: "content/images"
    max_size: int = MAX_IMAGE_SIZE
    target_width: int = 0  # 0 = sin límite en este eje
    target_height: int = 0


class UploadError(BaseModel):
    kind: UploadErrorKind
    message: str


class UploadResult(BaseModel):
    """Resultado de una subida: ruta final o error, nunca los dos."""

    path: Optional[str] = None
    error: Optional[UploadError] = None

    @model_validator(mode="after")
    def check_path_or_error(self) -> "UploadResult":
        if (self.path is None) == (self.error is None):
            raise ValueError("UploadResult necesita una ruta o un error, no ambos")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, path: str) -> "UploadResult":
        return cls(path=path)

    @classmethod
    def failure(cls, exc: UploadFailed) -> "UploadResult":
        return cls(error=UploadError(kind=exc.kind, message=exc.message))
