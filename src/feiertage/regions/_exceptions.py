class RegionError(ValueError):
    """Raised for region lookups that match no German region."""
