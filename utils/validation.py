"""
Validation Module - Contact form schema and submission validator

validate_contact() never raises for bad input. It returns a ValidationResult
tagged with ``ok``; callers branch on the tag.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.networks import validate_email


NAME_MIN_LENGTH = 2
MESSAGE_MIN_LENGTH = 10

# Caller-facing messages, keyed by field
FIELD_MESSAGES = {
    'name': f'Name must be at least {NAME_MIN_LENGTH} characters',
    'email': 'Invalid email address',
    'message': f'Message must be at least {MESSAGE_MIN_LENGTH} characters',
}


class ContactDraft(BaseModel):
    """Validated contact fields, not yet stored"""

    model_config = ConfigDict(str_strip_whitespace=True, frozen=True, extra='ignore')

    name: str = Field(min_length=NAME_MIN_LENGTH)
    email: str
    company: Optional[str] = None
    message: str = Field(min_length=MESSAGE_MIN_LENGTH)

    @field_validator('email')
    @classmethod
    def plain_address_only(cls, value):
        # Display-name forms like "Jo <jo@example.com>" are not addresses
        if any(ch in value for ch in '<>') or any(ch.isspace() for ch in value):
            raise ValueError('Invalid email address')
        validate_email(value)
        # Keep the address as submitted, not the normalized form
        return value

    @field_validator('company')
    @classmethod
    def blank_company_is_absent(cls, value):
        return value or None


@dataclass(frozen=True)
class FieldViolation:
    field: str
    code: str
    message: str

    def to_dict(self):
        return {'field': self.field, 'code': self.code, 'message': self.message}


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    draft: Optional[ContactDraft] = None
    errors: List[FieldViolation] = field(default_factory=list)

    @classmethod
    def success(cls, draft):
        return cls(ok=True, draft=draft)

    @classmethod
    def failure(cls, errors):
        return cls(ok=False, errors=list(errors))

    def errors_as_dicts(self):
        return [e.to_dict() for e in self.errors]


def _violation_from_pydantic(error) -> FieldViolation:
    loc = error.get('loc') or ()
    field_name = str(loc[0]) if loc else 'body'
    code = error.get('type', 'invalid')

    if code == 'missing':
        message = 'Required'
    elif code == 'string_type':
        message = 'Expected string'
    else:
        message = FIELD_MESSAGES.get(field_name, error.get('msg', 'Invalid value'))
    return FieldViolation(field=field_name, code=code, message=message)


def validate_contact(payload: Any) -> ValidationResult:
    """
    Validate an untyped contact payload

    Args:
        payload: Parsed request body of unknown shape

    Returns:
        ValidationResult: ``ok`` with a ContactDraft, or a failure listing
        every violated field constraint
    """
    if not isinstance(payload, dict):
        return ValidationResult.failure([
            FieldViolation(field='body', code='model_type', message='Expected a JSON object')
        ])

    try:
        draft = ContactDraft.model_validate(payload)
    except ValidationError as e:
        return ValidationResult.failure(_violation_from_pydantic(err) for err in e.errors())
    return ValidationResult.success(draft)


__all__ = [
    'ContactDraft',
    'FieldViolation',
    'ValidationResult',
    'validate_contact',
    'NAME_MIN_LENGTH',
    'MESSAGE_MIN_LENGTH',
]
