class InvalidInput(Exception):
    """operation received a missing value"""
