## Content lookup errors

NOT_FOUND_MESSAGE = "You missed it"
RESOLUTION_FAILED_MESSAGE = "Content could not be loaded"


class ContentError(Exception):
    pass


class ContentNotFound(ContentError):
    """No record is registered under (lang, name)."""

    def __init__(self, lang: str, name: str):
        super().__init__(NOT_FOUND_MESSAGE)
        self.lang = lang
        self.name = name


class ContentResolutionError(ContentError):
    """Lookup failed for a reason other than a missing key; the cause is chained."""

    def __init__(self, lang: str, name: str):
        super().__init__(RESOLUTION_FAILED_MESSAGE)
        self.lang = lang
        self.name = name


class RegistryValidationError(ContentError):
    pass
