"""Constants for card document field names"""


class CardFields:
    """Field name constants for the cards collection"""
    ID = "id"
    LONG_NUM = "longNum"
    EXPIRES = "expires"
    CCV = "ccv"

    # MongoDB specific
    MONGO_ID = "_id"
