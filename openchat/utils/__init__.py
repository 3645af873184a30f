from .datetime_utils import utc_now, ensure_utc, to_bson_precision

__all__ = ["utc_now", "ensure_utc", "to_bson_precision"]
