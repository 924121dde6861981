# Import models so they are registered on Base.metadata
from db_models.category import AssetCategory
from db_models.location import Location
from db_models.asset import Asset

__all__ = ["Asset", "AssetCategory", "Location"]
