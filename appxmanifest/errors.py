class ManifestError(Exception):
    pass


class VisualElementsNotFoundError(ManifestError, ValueError):
    def __init__(self):
        super().__init__('Could not parse the VisualElements from the app manifest.')


class MissingAttributeError(ManifestError, LookupError):
    def __init__(self, attribute: str):
        self.attribute = attribute
        super().__init__(f'VisualElements is missing the required {attribute} attribute.')


class InvalidColorError(ManifestError, ValueError):
    def __init__(self, value: str):
        self.value = value
        super().__init__('This does not appear to be a proper hex color number')
