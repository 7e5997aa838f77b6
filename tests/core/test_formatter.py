# topmark:header:start
#
#   project      : Ante
#   file         : test_formatter.py
#   file_relpath : tests/core/test_formatter.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""Column layout of header lines."""

from __future__ import annotations

from ante.core.formatter import (
    Column,
    adjust_to_width,
    format_copyright_line,
    format_line,
    format_spdx_line,
    generate_separator,
    pad_to_column,
    trim_to_width,
)
from tests.conftest import make_config


def test_format_line_places_columns_at_offsets() -> None:
    line = format_line([Column("a", 0), Column("b", 5), Column("c", 10)])
    assert line == "a    b    c"
    assert line.index("b") == 5
    assert line.index("c") == 10


def test_format_line_sorts_by_position() -> None:
    assert format_line([Column("c", 10), Column("a", 0), Column("b", 5)]) == "a    b    c"


def test_format_line_overlap_inserts_one_space() -> None:
    """A fragment running past the next column is never truncated."""
    assert format_line([Column("abcdefgh", 0), Column("X", 4)]) == "abcdefgh X"


def test_format_line_cursor_on_column_still_inserts_one_space() -> None:
    """A fragment ending exactly where the next one starts keeps them apart."""
    assert format_line([Column("abcd", 0), Column("X", 4)]) == "abcd X"


def test_format_line_empty() -> None:
    assert format_line([]) == ""


def test_format_line_leading_padding() -> None:
    assert format_line([Column("x", 3)]) == "   x"


def test_generate_separator() -> None:
    assert generate_separator(10) == "//--------"
    assert generate_separator(6, "=", "#") == "#====="
    assert generate_separator(2) == "//"
    assert generate_separator(0) == "//"


def test_pad_and_trim_helpers() -> None:
    assert pad_to_column("ab", 5) == "ab   "
    assert pad_to_column("abcdef", 5) == "abcdef "
    assert trim_to_width("abcdef", 3) == "abc"
    assert trim_to_width("ab", 3) == "ab"
    assert adjust_to_width("ab", 4) == "ab  "
    assert adjust_to_width("abcdef", 4) == "abcd"
    assert adjust_to_width("abcd", 4) == "abcd"


def test_format_copyright_line_columns() -> None:
    config = make_config()
    line = format_copyright_line(config, "2020-2025", "Jane Doe", "jane@example.com")
    assert line.startswith("// Copyright (c) 2020-2025")
    assert line.index("Jane Doe") == config.name_column
    assert line.index("jane@example.com") == config.email_column


def test_format_copyright_continuation_line() -> None:
    config = make_config()
    line = format_copyright_line(config, "", "John Roe", "john@example.com")
    assert "Copyright" not in line
    assert line.startswith("//" + " " * (config.name_column - 2) + "John Roe")


def test_format_spdx_line_full() -> None:
    config = make_config(
        spdx_license="MIT", license_url="https://mit.example", maintainer_email="ops@example.com"
    )
    line = format_spdx_line(config)
    assert line.startswith("// SPDX-License-Identifier: MIT")
    assert line.index("https://mit.example") == config.license_url_column
    assert line.index("ops@example.com") == config.maintainer_column


def test_format_spdx_line_url_reaching_maintainer_column() -> None:
    # The derived MIT url ends exactly at the default maintainer column
    config = make_config(spdx_license="MIT", maintainer_email="ops@example.com")
    line = format_spdx_line(config)
    url = "https://opensource.org/licenses/MIT"
    assert config.license_url_column + len(url) == config.maintainer_column
    assert line.endswith(f"{url} ops@example.com")
    assert line.index("ops@example.com") == config.maintainer_column + 1


def test_format_spdx_line_omits_empty_fields() -> None:
    config = make_config(spdx_license="MIT", license_url="", maintainer_email="")
    # license_url is derived from the SPDX id when left empty
    assert format_spdx_line(config).endswith("https://opensource.org/licenses/MIT")

    bare = make_config()
    assert format_spdx_line(bare) == "// SPDX-License-Identifier: "
