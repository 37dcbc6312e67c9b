from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} inválido")
    return str(value).strip()


def coerce_count(value: Any, field_name: str) -> int:
    """Counts typed by hand in forms: empty means zero, negatives are rejected.

    Whole-number text such as ``"2.0"`` is accepted.
    """
    if value is None or value == "":
        return 0
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} deve ser um número inteiro")
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field_name} deve ser um número inteiro")
    if not number.is_finite() or number != number.to_integral_value():
        raise ValidationError(f"{field_name} deve ser um número inteiro")
    if number < 0:
        raise ValidationError(f"{field_name} não pode ser negativo")
    return int(number)


def _normalize_money_text(text: str) -> str:
    # pt-BR "1.234,50" -> "1234.50"
    text = text.strip().replace("R$", "").strip()
    if "," in text:
        text = text.replace(".", "").replace(",", ".")
    return text


def coerce_money(value: Any, field_name: str) -> Decimal:
    if value is None or value == "":
        return Decimal("0")
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} inválido")
    try:
        amount = Decimal(_normalize_money_text(str(value)))
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field_name} inválido")
    if not amount.is_finite():
        raise ValidationError(f"{field_name} inválido")
    if amount < 0:
        raise ValidationError(f"{field_name} não pode ser negativo")
    return amount


def coerce_flag(value: Any, field_name: str, *, default: bool) -> bool:
    """Booleans stored as JSON bools, numbers or text ("true", "0", "sim")."""
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    text = str(value).strip().lower()
    if text in {"true", "1", "yes", "sim", "s"}:
        return True
    if text in {"false", "0", "no", "nao", "não", "n"}:
        return False
    raise ValidationError(f"{field_name} inválido")
