import re
from typing import List

CHUNK_SIZE = 10_000
MIN_STRING_OBJECTS = 10

_NON_PRINTABLE_RE = re.compile(r"[^\x20-\x7E\n]")


def find_string_objects(raw: str) -> List[str]:
    """
    Contenus des chaînes littérales PDF "(...)", qui portent souvent le texte affiché.
    Parcours linéaire : chaque morceau avant un ")" donne le texte qui suit
    son premier "(" s'il n'est pas vide (mêmes résultats que \\(([^)]+)\\)).
    """
    found = []
    for piece in raw.split(")")[:-1]:
        _, sep, inner = piece.partition("(")
        if sep and inner:
            found.append(inner)
    return found


def extract_text(data: bytes) -> str:
    """
    Extrait un texte approximatif depuis les octets bruts d'un PDF.
    Heuristique, pas un parseur PDF (pas de xref, pas de décompression) :
    - si le document contient au moins 10 chaînes littérales "(...)",
      on renvoie leurs contenus joints par un espace ;
    - sinon on décode en UTF-8 tolérant et on remplace tout caractère
      non imprimable (hors \\n) par un espace.
    Ne lève jamais d'exception ; c'est la longueur du résultat qui
    indique la qualité de l'extraction.
    """
    if not data:
        return ""

    raw = "".join(
        data[i:i + CHUNK_SIZE].decode("latin-1")
        for i in range(0, len(data), CHUNK_SIZE)
    )

    literals = find_string_objects(raw)
    if len(literals) >= MIN_STRING_OBJECTS:
        return " ".join(literals)

    decoded = data.decode("utf-8", errors="replace")
    return _NON_PRINTABLE_RE.sub(" ", decoded)
