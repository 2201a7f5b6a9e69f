import pytest
from loyalty.shared.email import EmailAddress
from protean.exceptions import ValidationError


def test_email_address_element_type():
    from protean.utils import DomainObjects

    assert EmailAddress.element_type == DomainObjects.VALUE_OBJECT


def test_email_address_requires_address():
    with pytest.raises(ValidationError):
        EmailAddress()


def test_email_address_has_max_length():
    with pytest.raises(ValidationError):
        EmailAddress(address="a" * 243 + "@example.com")


@pytest.mark.parametrize(
    "email",
    [
        "user@example.com",
        "user.name@example.com",
        "user+tag@example.com",
        "user@sub.domain.com",
        "user@example.co.uk",
        "user123@example.com",
        "a@b.cc",
    ],
    ids=[
        "simple",
        "dotted_local",
        "plus_tag",
        "subdomain",
        "country_tld",
        "numeric_local",
        "minimal",
    ],
)
def test_valid_email_addresses(email):
    vo = EmailAddress(address=email)
    assert vo.address == email


@pytest.mark.parametrize(
    "email",
    [
        "plainaddress",
        "@example.com",
        "user@",
        "user@@example.com",
        "user@example",
        "user name@example.com",
        ".user@example.com",
        "user.@example.com",
        "user@.example.com",
        "user@example.com.",
        "user..name@example.com",
        "user@-example.com",
        "user@example-.com",
        "user;name@example.com",
        "<user>@example.com",
    ],
    ids=[
        "no_at",
        "empty_local",
        "empty_domain",
        "double_at",
        "undotted_domain",
        "whitespace",
        "leading_dot_local",
        "trailing_dot_local",
        "leading_dot_domain",
        "trailing_dot_domain",
        "consecutive_dots",
        "hyphen_leading_label",
        "hyphen_trailing_label",
        "semicolon",
        "angle_brackets",
    ],
)
def test_invalid_email_addresses(email):
    with pytest.raises(ValidationError):
        EmailAddress(address=email)
