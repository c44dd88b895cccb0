from enum import Enum


class UploadErrorKind(str, Enum):
    """Tipos de error que puede devolver una subida."""

    NO_EXTENSION = "NoExtension"
    DISALLOWED_TYPE = "DisallowedType"
    TOO_LARGE = "TooLarge"
    DIRECTORY_ERROR = "DirectoryError"
    WRITE_ERROR = "WriteError"
    INVALID_FORMAT = "InvalidFormat"
    DECODE_ERROR = "DecodeError"
    UNSUPPORTED_FORMAT = "UnsupportedFormat"
    ENCODE_ERROR = "EncodeError"
    WORKER_FAILURE = "WorkerFailure"


class UploadFailed(Exception):
    """Error interno de la subida. Los servicios lo convierten en UploadResult."""

    def __init__(self, kind: UploadErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self):
        return f"{self.kind.value}: {self.message}"
