from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from domain.enums.resize_mode import ResizeMode


class ResizePolicy(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: ResizeMode
    width: int = 0
    height: int = 0

    @classmethod
    def from_dimensions(cls, width: int, height: int) -> "ResizePolicy":
        """Elige la política una sola vez a partir de las dimensiones pedidas."""
        if height == 0 and width > 0:
            return cls(mode=ResizeMode.SCALE_TO_WIDTH, width=width)
        if width == 0 and height > 0:
            return cls(mode=ResizeMode.SCALE_TO_HEIGHT, height=height)
        if width > 0 and height > 0:
            return cls(mode=ResizeMode.FORCE_EXACT, width=width, height=height)
        return cls(mode=ResizeMode.NO_RESIZE)

    def target_size(self, original_width: int, original_height: int) -> Optional[Tuple[int, int]]:
        """
        Calcula el tamaño final para una imagen de original_width x original_height.

        Returns:
            (ancho, alto) si hay que redimensionar, None si la imagen se deja igual
        """
        if self.mode is ResizeMode.SCALE_TO_WIDTH:
            if original_width <= self.width:
                return None
            return self.width, _scale(original_height, self.width, original_width)

        if self.mode is ResizeMode.SCALE_TO_HEIGHT:
            if original_height <= self.height:
                return None
            return _scale(original_width, self.height, original_height), self.height

        if self.mode is ResizeMode.FORCE_EXACT:
            return self.width, self.height

        return None


def _scale(side: int, target: int, reference: int) -> int:
    # Redondeo .5 hacia arriba, mínimo 1 píxel
    return max(1, int(side * target / reference + 0.5))
