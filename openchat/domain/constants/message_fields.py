"""Constants for Message model field names"""


class MessageFields:
    """Field name constants for Message model"""
    SENDER = "sender"
    CONTENT = "content"
    TIMESTAMP = "timestamp"

    # MongoDB specific
    MONGO_ID = "_id"  # holds the integer sequence ID
