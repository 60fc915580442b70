"""Normalization of browser identities reported by the remote device cloud."""

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import Field, field_validator

from browser_grid.models.base import Model
from browser_grid.models.target import Target


class NormalizationTables(Model):
    """Raw-to-canonical lookup tables for browser and platform names."""

    browser_names: Mapping[str, str] = Field(
        default_factory=dict,
        validate_default=True,
        description="Raw browser name to canonical name",
    )
    platforms: Mapping[str, str] = Field(
        default_factory=dict,
        validate_default=True,
        description="Raw platform name to canonical platform",
    )

    @field_validator("browser_names", "platforms", mode="after")
    @classmethod
    def _read_only(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))


DEFAULT_TABLES = NormalizationTables(
    browser_names={
        "Chrome": "chrome",
        "Safari": "safari",
        "Mobile Safari": "iphone",
        "Opera": "opera",
        "Internet Explorer": "internet explorer",
        "Firefox": "firefox",
        "Android": "android",
    },
    platforms={
        "Windows XP": "Windows 2003",
        "Windows 7": "Windows 2008",
        "Windows 8": "Windows 2012",
        "iOS 5.08": "Mac 10.6",
        "Mac OS X 10.6.8": "Mac 10.6",
        "Linux": "Linux",
        "Linuxux": "Linux",
        "Linuxx": "Linux",
    },
)


class NameResolver:
    """Resolves raw browser identities against the normalization tables."""

    def __init__(self, tables: NormalizationTables = DEFAULT_TABLES) -> None:
        self.tables = tables

    def resolve(
        self, raw_name: str, raw_platform: str
    ) -> tuple[str | None, str | None]:
        """Look up canonical names; unknown raw names resolve to None."""
        return (
            self.tables.browser_names.get(raw_name),
            self.tables.platforms.get(raw_platform),
        )

    def matches(self, target: Target, raw_name: str, raw_platform: str) -> bool:
        """Check whether a raw identity refers to the given target.

        An identity that cannot be fully resolved matches nothing.
        """
        name, platform = self.resolve(raw_name, raw_platform)
        if name is None or platform is None:
            return False
        return (
            target.name.lower() == name.lower()
            and target.platform.lower() == platform.lower()
        )
