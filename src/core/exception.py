class BaseAppError(Exception):
    def __init__(self, message: str = "An error occured"):
        self.message = message
        super().__init__(self.message)


class AppValueError(BaseAppError):
    pass


class NotFoundError(BaseAppError):
    def __init__(self, message: str = "Resource not found"):
        super().__init__(message)


class UnknownLocaleError(AppValueError):
    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(f"Unsupported locale '{locale}'")
