from datetime import datetime

from bson import ObjectId
from flask.json.provider import DefaultJSONProvider

from utils.datetime_utils import format_datetime


class MongoJSONProvider(DefaultJSONProvider):
    """Renders ObjectIds as hex strings and datetimes as ISO-8601 UTC."""

    # keep documents in the order they were built
    sort_keys = False

    @staticmethod
    def default(o):
        if isinstance(o, ObjectId):
            return str(o)
        if isinstance(o, datetime):
            return format_datetime(o)
        return DefaultJSONProvider.default(o)
