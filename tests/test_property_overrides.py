"""Property-based checks for ``--set`` override parsing."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from greetings.adapters.config.overrides import coerce_value, parse_override

IDENTIFIER = st.from_regex(r"[A-Za-z_][A-Za-z0-9_]*", fullmatch=True)
ALLOWED_COERCED_TYPES = (str, int, float, bool, type(None), list, dict)


@pytest.mark.os_agnostic
@given(raw=st.text())
@settings(max_examples=200)
def test_coerce_value_never_raises(raw: str) -> None:
    """Any string coerces to a JSON-compatible Python value."""
    assert isinstance(coerce_value(raw), ALLOWED_COERCED_TYPES)


@pytest.mark.os_agnostic
@given(value=st.integers(min_value=-(2**53), max_value=2**53))
def test_coerce_value_reads_integers(value: int) -> None:
    """Decimal integers come back as ints, as greetings.seed needs."""
    assert coerce_value(str(value)) == value


@pytest.mark.os_agnostic
@given(raw=IDENTIFIER.filter(lambda s: s not in ("true", "false", "null")))
def test_coerce_value_keeps_bare_names_as_strings(raw: str) -> None:
    """A bare name is not JSON and stays a string."""
    assert coerce_value(raw) == raw


@pytest.mark.os_agnostic
@given(section=IDENTIFIER, keys=st.lists(IDENTIFIER, min_size=1, max_size=4), value=st.text(max_size=40))
@settings(max_examples=200)
def test_parse_override_round_trips_well_formed_input(section: str, keys: list[str], value: str) -> None:
    """SECTION.KEY[.KEY...]=VALUE always parses back into its parts."""
    result = parse_override(f"{section}.{'.'.join(keys)}={value}")

    assert result.section == section
    assert result.key_path == tuple(keys)
    assert result.value == coerce_value(value)


@pytest.mark.os_agnostic
@given(raw=st.text().filter(lambda s: "=" not in s))
def test_parse_override_requires_equals(raw: str) -> None:
    """Strings without '=' are always rejected."""
    with pytest.raises(ValueError, match="must contain '='"):
        parse_override(raw)


@pytest.mark.os_agnostic
@given(path=st.text(min_size=1).filter(lambda s: "." not in s and "=" not in s), value=st.text(max_size=20))
def test_parse_override_requires_dotted_path(path: str, value: str) -> None:
    """A path without a dot is always rejected."""
    with pytest.raises(ValueError, match="must contain at least one dot"):
        parse_override(f"{path}={value}")
