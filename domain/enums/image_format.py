from enum import Enum

from domain.errors import UploadErrorKind, UploadFailed

class ImageFormat(Enum):
    """
    Formatos de salida soportados: (formato de Pillow, modo de píxel).
    """

    PNG = ("PNG", "RGBA")
    JPEG = ("JPEG", "RGB")  # Sin canal alfa
    GIF = ("GIF", "RGBA")  # Un solo frame

    @property
    def pil_format(self):
        """Devuelve el nombre del formato para Image.save."""
        return self.value[0]

    @property
    def mode(self):
        """Devuelve el modo al que se convierte la imagen antes de codificar."""
        return self.value[1]

    @classmethod
    def from_extension(cls, extension: str) -> "ImageFormat":
        try:
            return EXTENSION_FORMATS[extension]
        except KeyError:
            raise UploadFailed(
                UploadErrorKind.UNSUPPORTED_FORMAT,
                f"Formato de imagen no soportado: {extension}"
            )


EXTENSION_FORMATS = {
    "png": ImageFormat.PNG,
    "jpg": ImageFormat.JPEG,
    "jpeg": ImageFormat.JPEG,
    "gif": ImageFormat.GIF,
}

ALLOWED_IMAGE_TYPES = frozenset(EXTENSION_FORMATS)
