# Sustituciones literales, se aplican en este orden sobre toda la cadena
REPLACEMENTS = [
    ("à", "a"),
    ("è", "e"),
    ("é", "e"),
    ("ì", "i"),
    ("ò", "o"),
    ("ù", "u"),
    ("'", "-"),
    ("?", "-"),
    (" ", "-"),
    ("__", "-"),
    ("&", "e"),
    ("%", "-per-cento-"),
    ("#", "-"),
    ("(", ""),
    (")", ""),
    ("/", "-"),
    ("+", "_"),
    ("°", "_"),
]


def sanitize_name(name: str) -> str:
    """
    Convierte un nombre en un slug apto para el sistema de archivos.

    Solo colapsa grupos de exactamente tres guiones en una pasada
    ("a----b" -> "a--b"), por compatibilidad con los nombres ya guardados.
    """
    slug = name.strip().lower()

    for search, replace in REPLACEMENTS:
        slug = slug.replace(search, replace)

    return slug.replace("---", "-")
