from pydantic import BaseModel
from dotenv import load_dotenv
import os

load_dotenv()  # Carga las variables de entorno desde .env

class Settings(BaseModel):
    UPLOAD_DIR: str = os.getenv("UPLOAD_DIR", "content")
    MAX_FILE_SIZE: int = int(os.getenv("MAX_FILE_SIZE", 10 * 1024 * 1024))  # 10 MiB
    MAX_IMAGE_SIZE: int = int(os.getenv("MAX_IMAGE_SIZE", 5 * 1024 * 1024))  # 5 MiB
    ALLOWED_FILE_TYPES: str = os.getenv("ALLOWED_FILE_TYPES", "pdf,txt,doc,docx,zip")
    JPEG_QUALITY: int = int(os.getenv("JPEG_QUALITY", 85))

settings = Settings()

UPLOAD_DIR = settings.UPLOAD_DIR
MAX_FILE_SIZE = settings.MAX_FILE_SIZE
MAX_IMAGE_SIZE = settings.MAX_IMAGE_SIZE
ALLOWED_FILE_TYPES = settings.ALLOWED_FILE_TYPES
JPEG_QUALITY = settings.JPEG_QUALITY

# Lista separada por comas -> conjunto en minúsculas
ALLOWED_FILE_TYPES_SET = {
    ext.strip().lower() for ext in ALLOWED_FILE_TYPES.split(",") if ext.strip()
}
