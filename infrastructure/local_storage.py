import logging
import os
import uuid

from domain.errors import UploadErrorKind, UploadFailed

logger = logging.getLogger(__name__)


class LocalStorageClient:
    """Escritura de archivos en el directorio de contenidos local."""

    @staticmethod
    def ensure_directory(path: str) -> None:
        """Crea el directorio y todos los padres que falten"""
        try:
            os.makedirs(path, exist_ok=True)
        except OSError as e:
            logger.error(f"Error creando directorio {path}: {e}")
            raise UploadFailed(UploadErrorKind.DIRECTORY_ERROR, f"Error creando directorio {path}: {e}")

    @staticmethod
    def write_file(path: str, data: bytes) -> str:
        """Escribe el archivo completo o no deja nada visible en la ruta

        Args:
            path: Ruta final del archivo (se sobrescribe si existe)
            data: Contenido a escribir

        Returns:
            str: La ruta escrita

        Raises:
            UploadFailed: WriteError si falla cualquier operación de E/S
        """
        # Nombre corto en el mismo directorio: no depende de la longitud del destino
        tmp_path = os.path.join(os.path.dirname(path), f".{uuid.uuid4().hex}.tmp")
        created = False
        try:
            with open(tmp_path, "xb") as f:
                created = True
                f.write(data)
            os.replace(tmp_path, path)
        except OSError as e:
            logger.error(f"Error escribiendo archivo {path}: {e}")
            try:
                if created:
                    os.remove(tmp_path)
            except OSError as cleanup_error:
                logger.warning(f"No se pudo eliminar el temporal {tmp_path}: {cleanup_error}")
            raise UploadFailed(UploadErrorKind.WRITE_ERROR, f"Error escribiendo archivo {path}: {e}")

        return path
