# topmark:header:start
#
#   project      : Ante
#   file         : licenses.py
#   file_relpath : src/ante/core/licenses.py
#   license      : MIT
#   copyright    : (c) 2025 The Ante Authors
#
# topmark:header:end

"""SPDX license identifier to canonical license URL lookup."""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping

_GPL3_URL: Final[str] = "https://www.gnu.org/licenses/gpl-3.0.html"
_GPL2_URL: Final[str] = "https://www.gnu.org/licenses/old-licenses/gpl-2.0.html"

LICENSE_URLS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "MIT": "https://opensource.org/licenses/MIT",
        "MPL-2.0": "https://mozilla.org/MPL/2.0",
        "Apache-2.0": "https://www.apache.org/licenses/LICENSE-2.0",
        "GPL-3.0": _GPL3_URL,
        "GPL-3.0-only": _GPL3_URL,
        "GPL-3.0-or-later": _GPL3_URL,
        "GPL-3.0+": _GPL3_URL,
        "GPL-2.0": _GPL2_URL,
        "GPL-2.0-only": _GPL2_URL,
        "GPL-2.0-or-later": _GPL2_URL,
        "GPL-2.0+": _GPL2_URL,
        "LGPL-3.0": "https://www.gnu.org/licenses/lgpl-3.0.html",
        "LGPL-2.1": "https://www.gnu.org/licenses/old-licenses/lgpl-2.1.html",
        "BSD-2-Clause": "https://opensource.org/licenses/BSD-2-Clause",
        "BSD-3-Clause": "https://opensource.org/licenses/BSD-3-Clause",
        "ISC": "https://opensource.org/licenses/ISC",
        "Unlicense": "https://unlicense.org/",
        "WTFPL": "http://www.wtfpl.net/",
        "CC0-1.0": "https://creativecommons.org/publicdomain/zero/1.0/",
        "CC-BY-4.0": "https://creativecommons.org/licenses/by/4.0/",
        "CC-BY-SA-4.0": "https://creativecommons.org/licenses/by-sa/4.0/",
        "Zlib": "https://opensource.org/licenses/Zlib",
        "BSL-1.0": "https://www.boost.org/LICENSE_1_0.txt",
    }
)


def derive_license_url(spdx: str) -> str:
    """Return the canonical URL for an SPDX license identifier.

    Args:
        spdx (str): SPDX identifier, e.g. ``"MIT"`` or ``"MPL-2.0"``.

    Returns:
        str: The known URL for the license, the SPDX registry page for unknown
            identifiers, or an empty string for an empty identifier.
    """
    if not spdx:
        return ""
    return LICENSE_URLS.get(spdx, f"https://spdx.org/licenses/{spdx}.html")
