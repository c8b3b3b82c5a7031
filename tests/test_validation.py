"""Contact validator: field constraints, normalization and error reporting."""

import pytest

from utils.validation import ContactDraft, validate_contact


def fields(result):
    return {e.field for e in result.errors}


def test_valid_payload_is_accepted(valid_payload):
    result = validate_contact(valid_payload)
    assert result.ok
    assert result.errors == []
    assert isinstance(result.draft, ContactDraft)
    assert result.draft.name == "Jordan Lee"
    assert result.draft.email == "jordan@example.com"
    assert result.draft.company is None


def test_company_is_optional_and_kept_when_given(valid_payload):
    valid_payload["company"] = "  Acme Corp  "
    result = validate_contact(valid_payload)
    assert result.ok
    assert result.draft.company == "Acme Corp"


@pytest.mark.parametrize("company", ["", "   ", None])
def test_blank_company_is_treated_as_absent(valid_payload, company):
    valid_payload["company"] = company
    result = validate_contact(valid_payload)
    assert result.ok
    assert result.draft.company is None


@pytest.mark.parametrize("name", ["", "J", " J "])
def test_short_name_is_rejected(valid_payload, name):
    valid_payload["name"] = name
    result = validate_contact(valid_payload)
    assert not result.ok
    assert fields(result) == {"name"}
    assert result.errors[0].message == "Name must be at least 2 characters"


def test_two_character_name_is_accepted(valid_payload):
    valid_payload["name"] = "Jo"
    assert validate_contact(valid_payload).ok


@pytest.mark.parametrize("email", ["bad", "not-an-email", "a@", "@example.com", "jordan@@example.com"])
def test_malformed_email_is_rejected(valid_payload, email):
    valid_payload["email"] = email
    result = validate_contact(valid_payload)
    assert not result.ok
    assert fields(result) == {"email"}
    assert result.errors[0].message == "Invalid email address"


def test_short_message_is_rejected(valid_payload):
    valid_payload["message"] = "too short"
    result = validate_contact(valid_payload)
    assert not result.ok
    assert fields(result) == {"message"}
    assert result.errors[0].message == "Message must be at least 10 characters"


def test_whitespace_only_fields_fail_after_trimming(valid_payload):
    valid_payload["name"] = "     "
    valid_payload["message"] = "   hello       "
    result = validate_contact(valid_payload)
    assert not result.ok
    assert fields(result) == {"name", "message"}


def test_all_violations_are_reported():
    result = validate_contact({"name": "Jo", "email": "bad", "message": "short"})
    assert not result.ok
    assert fields(result) == {"email", "message"}


def test_missing_required_fields_are_reported():
    result = validate_contact({})
    assert not result.ok
    assert fields(result) == {"name", "email", "message"}
    assert all(e.code == "missing" and e.message == "Required" for e in result.errors)


def test_non_string_values_are_rejected(valid_payload):
    valid_payload["name"] = 12345
    result = validate_contact(valid_payload)
    assert not result.ok
    assert fields(result) == {"name"}
    assert result.errors[0].message == "Expected string"


@pytest.mark.parametrize("payload", [None, [], "name=Jo", 42])
def test_non_object_payload_is_rejected(payload):
    result = validate_contact(payload)
    assert not result.ok
    assert [e.to_dict() for e in result.errors] == [
        {"field": "body", "code": "model_type", "message": "Expected a JSON object"}
    ]


def test_unknown_fields_are_dropped(valid_payload):
    valid_payload["id"] = 99
    valid_payload["website"] = "spam"
    result = validate_contact(valid_payload)
    assert result.ok
    assert set(result.draft.model_dump()) == {"name", "email", "company", "message"}


def test_validation_does_not_mutate_input(valid_payload):
    valid_payload["name"] = "  Jordan Lee  "
    snapshot = dict(valid_payload)
    validate_contact(valid_payload)
    assert valid_payload == snapshot


def test_errors_as_dicts_shape():
    result = validate_contact({"name": "J", "email": "jordan@example.com", "message": "long enough message"})
    assert result.errors_as_dicts() == [
        {"field": "name", "code": "string_too_short", "message": "Name must be at least 2 characters"}
    ]


def test_long_fields_are_not_capped(valid_payload):
    valid_payload["company"] = "A" * 300
    valid_payload["message"] = "m" * 6000
    result = validate_contact(valid_payload)
    assert result.ok
    assert result.draft.company == "A" * 300
    assert len(result.draft.message) == 6000


@pytest.mark.parametrize("email", [
    "Jordan Lee <jordan@example.com>",
    "<jordan@example.com>",
    "jordan lee@example.com",
])
def test_display_name_and_spaced_emails_are_rejected(valid_payload, email):
    valid_payload["email"] = email
    result = validate_contact(valid_payload)
    assert not result.ok
    assert fields(result) == {"email"}
    assert result.errors[0].message == "Invalid email address"


def test_email_is_kept_as_submitted(valid_payload):
    valid_payload["email"] = "  Jordan@EXAMPLE.COM "
    result = validate_contact(valid_payload)
    assert result.ok
    assert result.draft.email == "Jordan@EXAMPLE.COM"
