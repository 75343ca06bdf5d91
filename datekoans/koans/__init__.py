"""The koan suites.

Importing this package registers every suite with the shared registry.
"""

from __future__ import annotations

from datekoans.koans.about_local_date import AboutLocalDate

__all__: list[str] = ["AboutLocalDate"]
