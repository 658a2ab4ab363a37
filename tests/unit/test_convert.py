"""Tests for synchronous conversion between record id kinds."""

import random

import pytest

from sierra_record_id import ConversionContext, RecordId, RecordIdKind
from sierra_record_id.convert import convert_record_id
from sierra_record_id.errors import (
    ConfigurationError,
    MissingFieldError,
    UnsupportedConversionError,
    VirtualRecordRestrictionError,
)
from sierra_record_id.models import CONCRETE_KINDS

API_HOST = "lib.example.edu"

# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_record_number_to_weak_key() -> None:
    """Test a record number needs and uses the record_type_code option."""
    source = RecordId.parse("RECORD_NUMBER", "1234567")
    assert convert_record_id(source, "WEAK_RECORD_KEY", record_type_code="b").value == "b1234567"


@pytest.mark.unit
@pytest.mark.parametrize("target", [k for k in CONCRETE_KINDS if k is not RecordIdKind.RECORD_NUMBER])
def test_record_number_requires_record_type_code(target: RecordIdKind) -> None:
    """Test converting a bare record number without a type fails."""
    source = RecordId.parse("RECORD_NUMBER", "1234567")
    with pytest.raises(MissingFieldError, match="record_type_code option is required"):
        convert_record_id(source, target, context={"api_host": API_HOST})


@pytest.mark.unit
def test_record_type_code_option_ignored_when_source_has_one() -> None:
    """Test the source's own record type code wins."""
    source = RecordId.parse("WEAK_RECORD_KEY", "i1234567")
    assert convert_record_id(source, "RELATIVE_V4_API_URL", record_type_code="b").value == "/v4/items/1234567"


@pytest.mark.unit
def test_relative_to_absolute_with_context_host() -> None:
    """Test absolute URLs take the host from the context and the default path."""
    source = RecordId.parse("RELATIVE_V4_API_URL", "/v4/bibs/1234567")
    converted = convert_record_id(source, "ABSOLUTE_V4_API_URL", context=ConversionContext(api_host=API_HOST))
    assert converted.value == "https://lib.example.edu/iii/sierra-api/v4/bibs/1234567"


@pytest.mark.unit
def test_weak_to_database_id() -> None:
    """Test a local weak key packs into a database id."""
    source = RecordId.parse("WEAK_RECORD_KEY", "b1234567")
    assert convert_record_id(source, "DATABASE_ID").value == "420908029575"


@pytest.mark.unit
def test_database_id_to_strong_key() -> None:
    """Test database ids unpack and get a check digit."""
    source = RecordId.parse("DATABASE_ID", "420908029575")
    assert convert_record_id(source, "STRONG_RECORD_KEY").value == "b12345672"


# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize(
    "value",
    [
        "1234567@abcd",
        "11822369929877127",
        "/v5/items/1234567",
        "https://a.example.edu/sierra/v4/bibs/1234567",
    ],
)
def test_identity_returns_source(value: str) -> None:
    """Test converting to the same kind is the identity."""
    source = RecordId.from_string(value)
    assert convert_record_id(source, source.kind) is source


@pytest.mark.unit
def test_identity_weak_key_reapplies_period() -> None:
    """Test weak to weak keeps the period unless told otherwise."""
    source = RecordId.parse("WEAK_RECORD_KEY", ".b1234567")
    assert convert_record_id(source, "WEAK_RECORD_KEY").value == ".b1234567"
    assert convert_record_id(source, "WEAK_RECORD_KEY", initial_period=False).value == "b1234567"


@pytest.mark.unit
def test_identity_strong_key_recomputes_check_digit() -> None:
    """Test strong to strong repairs a wrong check digit."""
    source = RecordId.parse("STRONG_RECORD_KEY", "b12345679")
    assert convert_record_id(source, "STRONG_RECORD_KEY").value == "b12345672"


# ---------------------------------------------------------------------------
# Record keys and periods
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_initial_period_option() -> None:
    """Test initial_period controls the leading period of key targets."""
    source = RecordId.parse("RELATIVE_V4_API_URL", "/v4/bibs/1234567")
    assert convert_record_id(source, "WEAK_RECORD_KEY", initial_period=True).value == ".b1234567"
    assert convert_record_id(source, "STRONG_RECORD_KEY").value == "b12345672"


@pytest.mark.unit
def test_strong_to_weak_drops_check_digit() -> None:
    """Test strong keys lose their check digit and keep their period."""
    source = RecordId.parse("STRONG_RECORD_KEY", ".b12345672@abcd")
    assert convert_record_id(source, "WEAK_RECORD_KEY").value == ".b1234567@abcd"


@pytest.mark.unit
def test_virtual_strong_key_downgrades_to_weak() -> None:
    """Test virtual records get weak keys unless strong ones are requested."""
    source = RecordId.parse("RELATIVE_V4_API_URL", "/v4/bibs/1234567@abcd")
    downgraded = convert_record_id(source, "STRONG_RECORD_KEY")
    assert downgraded.kind is RecordIdKind.WEAK_RECORD_KEY
    assert downgraded.value == "b1234567@abcd"

    strong = convert_record_id(source, "STRONG_RECORD_KEY", strong_keys_for_virtual_records=True)
    assert strong.value == "b12345672@abcd"


@pytest.mark.unit
def test_virtual_strong_to_strong_downgrades() -> None:
    """Test the downgrade applies even when the source is already strong."""
    source = RecordId.parse("STRONG_RECORD_KEY", "b12345672@abcd")
    assert convert_record_id(source, "STRONG_RECORD_KEY").kind is RecordIdKind.WEAK_RECORD_KEY


# ---------------------------------------------------------------------------
# Virtual records and database ids
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_virtual_to_database_id_needs_async() -> None:
    """Test virtual records cannot become database ids synchronously."""
    source = RecordId.parse("WEAK_RECORD_KEY", "b1234567@abcd")
    with pytest.raises(VirtualRecordRestrictionError, match="Must use convert_async instead"):
        convert_record_id(source, "DATABASE_ID")


@pytest.mark.unit
@pytest.mark.parametrize("target", ["RECORD_NUMBER", "WEAK_RECORD_KEY", "RELATIVE_V4_API_URL"])
def test_virtual_database_id_needs_async(target: str) -> None:
    """Test database ids with a campus id cannot leave the form synchronously."""
    source = RecordId.from_parts("DATABASE_ID", record_type_code="b", rec_num="1234567", campus_id=42)
    with pytest.raises(VirtualRecordRestrictionError, match="convert from database ids for virtual records"):
        convert_record_id(source, target)


# ---------------------------------------------------------------------------
# API URLs
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_api_url_unsupported_record_type() -> None:
    """Test record types without an API collection cannot become URLs."""
    source = RecordId.parse("WEAK_RECORD_KEY", "c1234567")
    with pytest.raises(UnsupportedConversionError, match="The API does not support records of type c") as exc_info:
        convert_record_id(source, "RELATIVE_V5_API_URL")
    assert exc_info.value.source == RecordIdKind.WEAK_RECORD_KEY
    assert exc_info.value.target == RecordIdKind.RELATIVE_V5_API_URL


@pytest.mark.unit
def test_absolute_url_without_host() -> None:
    """Test absolute URLs need a configured host."""
    source = RecordId.parse("WEAK_RECORD_KEY", "b1234567")
    with pytest.raises(ConfigurationError, match="SIERRA_API_HOST must be set"):
        convert_record_id(source, "ABSOLUTE_V4_API_URL")


@pytest.mark.unit
def test_absolute_url_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test the environment supplies host and path."""
    monkeypatch.setenv("SIERRA_API_HOST", "env.example.edu")
    monkeypatch.setenv("SIERRA_API_PATH", "/api/")
    source = RecordId.parse("WEAK_RECORD_KEY", "p1234567")
    assert convert_record_id(source, "ABSOLUTE_V5_API_URL").value == "https://env.example.edu/api/v5/patrons/1234567"


@pytest.mark.unit
def test_explicit_host_beats_context() -> None:
    """Test api_host/api_path options win over the context."""
    source = RecordId.parse("WEAK_RECORD_KEY", "b1234567")
    converted = convert_record_id(
        source,
        "ABSOLUTE_V4_API_URL",
        api_host="arg.example.edu",
        api_path="/arg/",
        context={"api_host": API_HOST},
    )
    assert converted.value == "https://arg.example.edu/arg/v4/bibs/1234567"


@pytest.mark.unit
def test_v4_v5_relabel_keeps_host_and_path() -> None:
    """Test absolute v4 to v5 keeps the source's host and path."""
    source = RecordId.parse("ABSOLUTE_V4_API_URL", "https://a.example.edu/sierra/v4/orders/1234567@xyz")
    converted = convert_record_id(source, "ABSOLUTE_V5_API_URL", context={"api_host": API_HOST})
    assert converted.value == "https://a.example.edu/sierra/v5/orders/1234567@xyz"


@pytest.mark.unit
def test_relative_v5_to_v4() -> None:
    """Test relative URLs relabel their version."""
    source = RecordId.parse("RELATIVE_V5_API_URL", "/v5/invoices/1234567")
    assert convert_record_id(source, "RELATIVE_V4_API_URL").value == "/v4/invoices/1234567"


@pytest.mark.unit
def test_ambiguous_target_refused() -> None:
    """Test the ambiguous tag is not a conversion target."""
    source = RecordId.parse("WEAK_RECORD_KEY", "b1234567")
    with pytest.raises(UnsupportedConversionError):
        convert_record_id(source, RecordIdKind.AMBIGUOUS_RECORD_KEY)


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


def _random_local_record_id(rng: random.Random, kind: RecordIdKind) -> RecordId:
    return RecordId.from_parts(
        kind,
        rec_num=str(rng.randint(100000, 9999999)),
        record_type_code=rng.choice("abniop"),
        initial_period=rng.random() < 0.5,
        context={"api_host": API_HOST},
    )


@pytest.mark.unit
def test_conversions_preserve_record() -> None:
    """Test any local record converted anywhere and back is unchanged."""
    rng = random.Random(31337)
    for _ in range(200):
        source_kind = rng.choice([k for k in CONCRETE_KINDS if k is not RecordIdKind.RECORD_NUMBER])
        target_kind = rng.choice(CONCRETE_KINDS)
        source = _random_local_record_id(rng, source_kind)
        options = {"context": {"api_host": API_HOST}, "initial_period": source.initial_period}
        there = convert_record_id(source, target_kind, **options)
        back = convert_record_id(there, source_kind, record_type_code=source.record_type_code, **options)
        assert back == source, (source, target_kind)


@pytest.mark.unit
def test_strong_targets_always_carry_valid_check_digit() -> None:
    """Test every produced strong key validates."""
    rng = random.Random(4242)
    for _ in range(200):
        source = _random_local_record_id(rng, rng.choice(CONCRETE_KINDS))
        strong = convert_record_id(source, "STRONG_RECORD_KEY", record_type_code="b")
        strong.validate()
