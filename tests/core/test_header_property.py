# topmark:header:start
#
#   project      : Ante
#   file         : test_header_property.py
#   file_relpath : tests/core/test_header_property.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

# pyright: strict

"""Property tests for the header engine.

For generated contributors, years and file bodies:
1) a generated header parses back to the same fields,
2) replacing a header leaves the body untouched, and
3) updating with values already present is a no-op.
"""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, given, settings

from ante.core.contributors import Contributor
from ante.core.header import (
    generate_header,
    parse_header,
    replace_header,
    update_header,
    validate_header,
)
from tests.conftest import make_config
from tests.strategies_ante import s_body, s_contributors, s_year_range

pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow

CONFIG = make_config(spdx_license="MIT", maintainer_email="ops@example.com")


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=60)
@given(contributors=s_contributors, years=s_year_range(), body=s_body)
def test_generate_parse_roundtrip(
    contributors: list[Contributor],
    years: tuple[int, int],
    body: str,
) -> None:
    """Fields survive generate, prepend and parse."""
    start, end = years
    header = generate_header(CONFIG, contributors, start, end)
    content = replace_header(body, header)

    parsed = parse_header(content)
    assert parsed is not None
    assert parsed.raw == header
    assert (parsed.year_start, parsed.year_end) == (start, end)
    assert list(parsed.contributors) == contributors[: CONFIG.max_contributors]
    assert parsed.spdx_license == "MIT"
    assert parsed.maintainer_email == "ops@example.com"
    assert validate_header(content, CONFIG, current_year=2099).valid


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=60)
@given(contributors=s_contributors, years=s_year_range(), body=s_body)
def test_replace_keeps_body(
    contributors: list[Contributor],
    years: tuple[int, int],
    body: str,
) -> None:
    """Swapping one header for another changes nothing below it."""
    start, end = years
    first = replace_header(body, generate_header(CONFIG, contributors, start, end))
    parsed = parse_header(first)
    assert parsed is not None

    second_header = generate_header(CONFIG, contributors[:1], start)
    second = replace_header(first, second_header, parsed)
    assert second.startswith(second_header + "\n")
    assert second[len(second_header) :] == first[len(parsed.raw) :]


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=60)
@given(contributors=s_contributors, years=s_year_range())
def test_update_with_known_values_is_noop(
    contributors: list[Contributor],
    years: tuple[int, int],
) -> None:
    """Re-adding a credited contributor or an older year regenerates the same text."""
    start, end = years
    header = generate_header(CONFIG, contributors, start, end)
    parsed = parse_header(header)
    assert parsed is not None
    assert update_header(parsed, CONFIG, new_contributor=contributors[0], update_year=start) == header
