import asyncio
import logging
from typing import Collection

from fastapi import UploadFile

from domain.errors import UploadErrorKind, UploadFailed
from domain.schemas.upload_schema import FileUploadRequest, UploadResult
from infrastructure.local_storage import LocalStorageClient
from services.upload_validator import get_extension, validate_extension, validate_size

logger = logging.getLogger(__name__)


class FileService:
    def __init__(self):
        self.storage = LocalStorageClient()

    async def process_and_save(self, file: UploadFile, request: FileUploadRequest) -> UploadResult:
        try:
            file_bytes = await file.read()
            return await self.save_file(
                request.base_dir,
                file.filename or "",
                file_bytes,
                request.allowed_types,
                request.max_size
            )
        finally:
            await file.close()

    async def save_file(
        self,
        base_dir: str,
        original_name: str,
        file_bytes: bytes,
        allowed_types: Collection[str],
        max_size: int
    ) -> UploadResult:
        """
        Valida y guarda un archivo tal cual en base_dir/original_name.

        El nombre no se limpia: se usa el original_name recibido.

        Returns:
            UploadResult con la ruta guardada o el error correspondiente
        """
        try:
            extension = get_extension(original_name)
            validate_extension(extension, allowed_types)
            validate_size(len(file_bytes), max_size)

            self.storage.ensure_directory(base_dir)
            save_path = f"{base_dir}/{original_name}"

            # Escritura fuera del event loop
            await asyncio.to_thread(self.storage.write_file, save_path, bytes(file_bytes))
        except UploadFailed as e:
            return UploadResult.failure(e)
        except Exception as e:
            logger.exception(f"Error en el hilo de escritura de {original_name}")
            return UploadResult.failure(
                UploadFailed(UploadErrorKind.WORKER_FAILURE, f"Error en el hilo de escritura: {e}")
            )

        logger.info(f"Archivo guardado en {save_path} ({len(file_bytes)} bytes)")
        return UploadResult.success(save_path)
