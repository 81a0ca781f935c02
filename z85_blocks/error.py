class Z85Error(Exception):
    pass


class InvalidInput(Z85Error):
    def __init__(self, message: str, value=None):
        super().__init__(message)
        self.input = value
