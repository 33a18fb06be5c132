"""Constants for customer document field names"""


class CustomerFields:
    """Field name constants for the customers collection"""
    ID = "id"
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    EMAIL = "email"
    USERNAME = "username"
    PASSWORD = "password"
    ADDRESSES = "addresses"  # list of address ObjectIds
    CARDS = "cards"  # list of card ObjectIds

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
