"""Item interactions."""

from chestshops.interactions.license import LicenseOutcome, is_double_chest, use_license

__all__ = ["LicenseOutcome", "is_double_chest", "use_license"]
