"""Adaptateur UTF-8 -> points de code Unicode."""
from typing import List, Union

Text = Union[str, bytes]


def code_points(text: Text) -> List[int]:
    """
    Convertit une chaîne en liste de points de code.

    Les `bytes` sont décodés en UTF-8 strict : une séquence invalide lève
    `UnicodeDecodeError` (responsabilité du codec, pas la nôtre).
    """
    if isinstance(text, bytes):
        text = text.decode("utf-8")
    return [ord(ch) for ch in text]


def decode_into(buffer: List[int], text: Text) -> List[int]:
    """Réécrit `buffer` en place avec les points de code de `text`."""
    if isinstance(text, bytes):
        text = text.decode("utf-8")
    buffer[:] = map(ord, text)
    return buffer
