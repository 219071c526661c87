import pytest
from awscred.codec.parser import parse
from awscred.codec.serializer import serialize
from awscred.errors import InvalidValue
from awscred.profiles.store import CredentialsStore, Profile

def test_serialize_empty_store():
    """Test that an empty store serializes to an empty string."""
    assert serialize(CredentialsStore()) == ""
    assert serialize(parse("")) == ""

def test_serialize_format():
    """Test the exact output layout."""
    store = CredentialsStore([
        Profile("default", {"aws_access_key_id": "AKIA", "aws_secret_access_key": "s"}),
        Profile("dev", {"region": "us-west-2"}),
    ])

    assert serialize(store) == (
        "[default]\n"
        "aws_access_key_id = AKIA\n"
        "aws_secret_access_key = s\n"
        "\n"
        "[dev]\n"
        "region = us-west-2\n"
    )

def test_serialize_profile_without_keys():
    """Test serializing a profile with no keys."""
    store = CredentialsStore([Profile("empty")])

    assert serialize(store) == "[empty]\n"

def test_serialize_drops_comments():
    """Test that comments do not survive a round trip."""
    text = "# comment\n[p]\n; another\nk = v\n"

    assert serialize(parse(text)) == "[p]\nk = v\n"

def test_round_trip():
    """Test that parsing serialized output gives back an equal store."""
    store = CredentialsStore([
        Profile("default", {"aws_access_key_id": "AKIA", "aws_secret_access_key": "a/b+c=="}),
        Profile("empty"),
        Profile("extra", {"z": "1", "a": "", "Mixed_Case": "x y"}),
    ])

    parsed = parse(serialize(store))

    assert parsed == store
    assert parsed.get("extra").keys() == ["z", "a", "Mixed_Case"]

def test_reserialization_is_idempotent():
    """Test that serialize(parse(serialize(store))) is stable."""
    text = "[b]\nk=v\n[a]\n  x =  1 \n\n\n[b]\nj = 2\n"

    once = serialize(parse(text))
    twice = serialize(parse(once))

    assert once == twice
    assert once == "[b]\nk = v\nj = 2\n\n[a]\nx = 1\n"

def test_serialize_rejects_newline_in_value():
    """Test that a value smuggled past validation is refused."""
    profile = Profile("p")
    profile._values["k"] = "line1\nline2"

    with pytest.raises(InvalidValue):
        serialize(CredentialsStore([profile]))

@pytest.mark.parametrize("separator", ["\x0b", "\x0c", "\x1c", "\x1d", "\x1e", "\x85", "\u2028", "\u2029"])
def test_round_trip_value_with_unicode_line_separator(separator):
    """Test that only real newlines split lines when reading back."""
    store = CredentialsStore([Profile("p", {"k": f"a{separator}b", "next": "v"})])

    parsed = parse(serialize(store))

    assert parsed == store
    assert parsed.get("p").get("k") == f"a{separator}b"
