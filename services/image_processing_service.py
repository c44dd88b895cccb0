from fastapi import UploadFile
from PIL import Image, UnidentifiedImageError
import asyncio
import io
import struct
import logging

from core.config import JPEG_QUALITY
from domain.enums.image_format import ALLOWED_IMAGE_TYPES, ImageFormat
from domain.errors import UploadErrorKind, UploadFailed
from domain.models import ResizePolicy
from domain.schemas.upload_schema import ImageUploadRequest, UploadResult
from infrastructure.local_storage import LocalStorageClient
from services.sanitizer import sanitize_name
from services.upload_validator import get_extension, validate_extension, validate_size

logger = logging.getLogger(__name__)

class ImageProcessingService:

    @staticmethod
    async def process_and_save(file: UploadFile, request: ImageUploadRequest) -> UploadResult:
        """Lee un UploadFile y lo guarda como imagen según la petición"""
        try:
            image_bytes = await file.read()
            return await ImageProcessingService.save_image(
                base_dir=request.base_dir,
                original_name=file.filename or "",
                image_bytes=image_bytes,
                max_size=request.max_size,
                width=request.target_width,
                height=request.target_height
            )
        finally:
            await file.close()

    @staticmethod
    async def save_image(
        base_dir: str,
        original_name: str,
        image_bytes: bytes,
        max_size: int,
        width: int,
        height: int
    ) -> UploadResult:
        """
        Valida, decodifica, redimensiona y recodifica una imagen, y la guarda en
        base_dir con el nombre limpio de original_name.

        width/height a 0 significa sin límite en ese eje; ver ResizePolicy.
        """
        try:
            # El tamaño se comprueba antes que la extensión
            validate_size(len(image_bytes), max_size)
            extension = get_extension(original_name)
            validate_extension(extension, ALLOWED_IMAGE_TYPES)
            image_format = ImageFormat.from_extension(extension)

            LocalStorageClient.ensure_directory(base_dir)
            save_path = f"{base_dir}/{sanitize_name(original_name)}"
            policy = ResizePolicy.from_dimensions(width, height)

            # Decodificar/redimensionar/codificar/escribir fuera del event loop
            written = await asyncio.to_thread(
                ImageProcessingService.process_image,
                bytes(image_bytes),
                policy,
                image_format,
                save_path
            )
        except UploadFailed as e:
            return UploadResult.failure(e)
        except Exception as e:
            logger.exception(f"Error en el hilo de procesamiento de {original_name}")
            return UploadResult.failure(
                UploadFailed(UploadErrorKind.WORKER_FAILURE, f"Error en el hilo de procesamiento: {e}")
            )

        logger.info(f"Imagen guardada en {save_path} ({written} bytes)")
        return UploadResult.success(save_path)

    @staticmethod
    def process_image(image_bytes: bytes, policy: ResizePolicy, image_format: ImageFormat, save_path: str) -> int:
        """Trabajo bloqueante completo. Devuelve los bytes escritos"""
        with ImageProcessingService.decode_image(image_bytes) as img:
            resized_img = ImageProcessingService.resize_image(img, policy)
            encoded = ImageProcessingService.encode_image(resized_img, image_format)

        LocalStorageClient.write_file(save_path, encoded)
        return len(encoded)

    @staticmethod
    def decode_image(image_bytes: bytes) -> Image.Image:
        """Abre la imagen detectando el formato por el contenido"""
        try:
            img = Image.open(io.BytesIO(image_bytes))
        except UnidentifiedImageError as e:
            logger.error(f"Formato de imagen no reconocido: {e}")
            raise UploadFailed(UploadErrorKind.INVALID_FORMAT, f"Formato de imagen no reconocido: {e}")
        except Image.DecompressionBombError as e:
            logger.error(f"Error decodificando imagen: {e}")
            raise UploadFailed(UploadErrorKind.DECODE_ERROR, f"Error decodificando imagen: {e}")

        try:
            # Forzar la lectura de los píxeles
            img.load()
        except (OSError, SyntaxError, ValueError, EOFError, struct.error) as e:
            img.close()
            logger.error(f"Error decodificando imagen: {e}")
            raise UploadFailed(UploadErrorKind.DECODE_ERROR, f"Error decodificando imagen: {e}")

        return img

    @staticmethod
    def resize_image(img: Image.Image, policy: ResizePolicy) -> Image.Image:
        new_size = policy.target_size(*img.size)
        if new_size is None:
            return img
        # Pillow usa NEAREST con imágenes en paleta o binarias
        if img.mode in ("1", "P"):
            img = img.convert("RGBA")
        return img.resize(new_size, Image.LANCZOS)

    @staticmethod
    def encode_image(img: Image.Image, image_format: ImageFormat) -> bytes:
        options = {"quality": JPEG_QUALITY} if image_format is ImageFormat.JPEG else {}

        try:
            final_img = img.convert(image_format.mode)
            img_byte_arr = io.BytesIO()
            final_img.save(img_byte_arr, format=image_format.pil_format, **options)
        except (OSError, ValueError) as e:
            logger.error(f"Error codificando imagen como {image_format.pil_format}: {e}")
            raise UploadFailed(
                UploadErrorKind.ENCODE_ERROR,
                f"Error codificando imagen como {image_format.pil_format}: {e}"
            )

        return img_byte_arr.getvalue()
