import logging
from pathlib import PurePosixPath
from typing import Collection

from domain.errors import UploadErrorKind, UploadFailed

logger = logging.getLogger(__name__)


def get_extension(filename: str) -> str:
    """Extensión en minúsculas del último componente del nombre."""
    name = PurePosixPath(filename).name
    stem, dot, ext = name.rpartition(".")
    # ".bashrc", "." y ".." no tienen extensión
    if not dot or not stem or name in (".", ".."):
        logger.warning(f"Archivo sin extensión: {filename!r}")
        raise UploadFailed(UploadErrorKind.NO_EXTENSION, f"Archivo sin extensión: {filename!r}")
    return ext.lower()


def validate_extension(extension: str, allowed_types: Collection[str]) -> None:
    if extension not in allowed_types:
        logger.warning(f"Tipo de archivo no permitido: {extension}")
        raise UploadFailed(UploadErrorKind.DISALLOWED_TYPE, f"Tipo de archivo no permitido: {extension}")


def validate_size(size: int, max_size: int) -> None:
    if size > max_size:
        logger.warning(f"Archivo demasiado grande: {size} bytes, máximo {max_size} bytes")
        raise UploadFailed(
            UploadErrorKind.TOO_LARGE,
            f"Archivo demasiado grande: {size} bytes, máximo {max_size} bytes"
        )
