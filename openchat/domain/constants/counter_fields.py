"""Constants for the id sequence documents"""


class CounterFields:
    """Field name constants for the counters collection"""
    MONGO_ID = "_id"  # sequence name, e.g. "users" or "messages"
    SEQUENCE = "seq"

    USERS = "users"
    MESSAGES = "messages"
