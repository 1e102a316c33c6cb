class FetchError(Exception):
    """Raised when a request to the dashboard backend fails"""
    def __init__(self, message="Request to the backend failed", endpoint=None):
        self.message = message
        self.endpoint = endpoint
        super().__init__(self.message)
