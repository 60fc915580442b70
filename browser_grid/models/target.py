"""Models for browser targets tracked by the grid."""

from pydantic import Field

from browser_grid.models.base import Model


class Target(Model):
    """A single browser/version/platform combination under test."""

    name: str = Field(..., description="Browser name (e.g., 'chrome')")
    version: str = Field(..., description="Browser version (e.g., '70')")
    platform: str = Field(..., description="Platform name (e.g., 'Windows 10')")

    @property
    def label(self) -> str:
        """Label drawn on the first row of the target's cell."""
        return f"{self.name} {self.version}"

    def __str__(self) -> str:
        return f"{self.name} {self.version} on {self.platform}"
