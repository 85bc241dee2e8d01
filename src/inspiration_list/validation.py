"""Schema-driven input validation.

Rules are plain data (``FieldRule``) evaluated by one generic validator,
so request schemas can be declared next to the code that uses them.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Literal

FieldType = Literal["string", "integer", "number", "boolean", "array", "object"]

_TYPE_CHECKS: dict[str, tuple[type, ...]] = {
    "string": (str,),
    "integer": (int,),
    "number": (int, float),
    "boolean": (bool,),
    "array": (list, tuple),
    "object": (dict,),
}


@dataclass(frozen=True)
class FieldRule:
    """Constraints for a single input field"""

    required: bool = False
    type: FieldType | None = None
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None


@dataclass
class ValidationResult:
    """Outcome of validate_input()"""

    valid: bool
    errors: list[str] = field(default_factory=list)


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def _matches_type(value: Any, type_name: str) -> bool:
    # bool is an int subclass; keep it out of numeric types
    if isinstance(value, bool) and type_name in ("integer", "number"):
        return False
    return isinstance(value, _TYPE_CHECKS[type_name])


def validate_input(data: dict[str, Any], rules: dict[str, FieldRule]) -> ValidationResult:
    """Validate ``data`` against ``rules``.

    Blank strings count as missing for required fields. Length and pattern
    checks only apply to string values. Fields absent from ``rules`` are
    ignored.
    """
    errors: list[str] = []

    for name, rule in rules.items():
        value = data.get(name)

        if _is_missing(value):
            if rule.required:
                errors.append(f"{name} is required")
            continue

        if rule.type and not _matches_type(value, rule.type):
            errors.append(f"{name} must be of type {rule.type}")
            continue

        if not isinstance(value, str):
            continue

        if rule.min_length is not None and len(value) < rule.min_length:
            errors.append(f"{name} must be at least {rule.min_length} characters long")

        if rule.max_length is not None and len(value) > rule.max_length:
            errors.append(f"{name} must be no more than {rule.max_length} characters long")

        if rule.pattern is not None and not re.search(rule.pattern, value):
            errors.append(f"{name} format is invalid")

    return ValidationResult(valid=not errors, errors=errors)


def inspiration_create_rules(max_text_length: int = 5000) -> dict[str, FieldRule]:
    """Schema for a new inspiration payload"""
    return {
        "transcribedText": FieldRule(
            required=True,
            type="string",
            min_length=1,
            max_length=max_text_length,
        ),
        "audioData": FieldRule(type="string"),
    }
