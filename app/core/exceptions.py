class SubscriptionServiceError(Exception):
    """Base class for errors that are reported to the client as {"error": message}"""
    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

class ValidationError(SubscriptionServiceError):
    """Malformed date, UUID or required field"""
    status_code = 400

class NotFoundError(SubscriptionServiceError):
    """No subscription row matches the id"""
    status_code = 404

class StorageError(SubscriptionServiceError):
    """The database failed to execute a statement"""
    status_code = 500
