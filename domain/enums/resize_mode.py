from enum import Enum

class ResizeMode(Enum):
    """
    Política de redimensionado, elegida a partir del par (width, height).
    - NO_RESIZE: ambos a cero o negativos.
    - SCALE_TO_WIDTH: solo ancho, mantiene proporción.
    - SCALE_TO_HEIGHT: solo alto, mantiene proporción.
    - FORCE_EXACT: ancho y alto exactos, puede deformar.
    """

    NO_RESIZE = "no_resize"
    SCALE_TO_WIDTH = "scale_to_width"
    SCALE_TO_HEIGHT = "scale_to_height"
    FORCE_EXACT = "force_exact"
