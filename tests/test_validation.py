import pytest

from services.validation import (
    INVALID_EMAIL_MESSAGE, NUMBER_MESSAGE, REQUIRED_MESSAGE, WEAK_PASSWORD_MESSAGE,
    FieldConstraint, check_validity, is_strong_password, is_valid_email,
)


@pytest.mark.parametrize("password,ok", [
    ("Str0ng!pass", True),
    ("Aa1_aaaa", True),
    ("short1!A", True),
    ("Sh0rt!", False),         # too short
    ("alllower1!", False),     # no upper
    ("ALLUPPER1!", False),     # no lower
    ("NoDigits!!", False),
    ("NoSpecial12", False),
    ("", False),
])
def test_password_policy(password, ok):
    assert is_strong_password(password) is ok


def test_email_format():
    assert is_valid_email("user@domain.com")
    assert not is_valid_email("user@domain")
    assert not is_valid_email("user.domain.com")


def test_check_validity_reports_first_problem_per_field():
    constraints = [
        FieldConstraint("email", kind="email"),
        FieldConstraint("age", kind="number"),
        FieldConstraint("password", strong_password=True),
        FieldConstraint("nickname", required=False),
        FieldConstraint("lastName"),
    ]
    errors = check_validity(
        {"email": "bad", "age": "ten", "password": "weak", "lastName": "  "}, constraints)
    assert errors == {
        "email": INVALID_EMAIL_MESSAGE,
        "age": NUMBER_MESSAGE,
        "password": WEAK_PASSWORD_MESSAGE,
        "lastName": REQUIRED_MESSAGE,
    }


def test_custom_required_message():
    c = FieldConstraint("email", kind="email", required_message="Email is a required field.")
    assert check_validity({}, [c]) == {"email": "Email is a required field."}
