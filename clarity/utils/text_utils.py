import re
from typing import Iterable

_FENCE_RE = re.compile(r"```json|```")


def strip_code_fences(text: str) -> str:
    """
    Retire les balises ```json / ``` que le modèle ajoute autour du JSON.
    """
    if not text:
        return ""
    return _FENCE_RE.sub("", text).strip()


def mean(values: Iterable[float]) -> float:
    """
    Moyenne arithmétique ; 0 pour une liste vide.
    """
    items = list(values)
    if not items:
        return 0.0
    return sum(items) / len(items)
