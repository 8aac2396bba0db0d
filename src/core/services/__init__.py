"""Pure fixture modules (no I/O).

Por qué un paquete aparte:
- Son los sujetos de test más simples: entradas -> salida, sin efectos.
- El CLI y los tests los consumen directamente.
"""

from core.services.arithmetic import add, div, mul, sub
from core.services.stats import negative, positive, total, zeros
from core.services.text_relations import is_anagram, is_palindrome

__all__ = [
    "add",
    "div",
    "is_anagram",
    "is_palindrome",
    "mul",
    "negative",
    "positive",
    "sub",
    "total",
    "zeros",
]
