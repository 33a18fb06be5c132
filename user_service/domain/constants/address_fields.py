"""Constants for address document field names"""


class AddressFields:
    """Field name constants for the addresses collection"""
    ID = "id"
    STREET = "street"
    NUMBER = "number"
    COUNTRY = "country"
    CITY = "city"
    POSTCODE = "postcode"

    # MongoDB specific
    MONGO_ID = "_id"
