from enum import Enum

MANIFEST_FILE_NAME = 'AppxManifest.xml'
APP_URI_PREFIX = 'ms-appx:///'

DISPLAY_NAME_ATTRIBUTE = 'DisplayName'
DESCRIPTION_ATTRIBUTE = 'Description'
LOGO_ATTRIBUTE = 'Square150x150Logo'
BACKGROUND_COLOR_ATTRIBUTE = 'BackgroundColor'


class SchemaVariant(Enum):
    """Manifest schema generation: namespace of VisualElements and its small logo attribute."""
    UAP = ('http://schemas.microsoft.com/appx/manifest/uap/windows10', 'Square44x44Logo')
    WIN81 = ('http://schemas.microsoft.com/appx/2013/manifest', 'Square30x30Logo')

    @property
    def namespace(self) -> str:
        return self.value[0]

    @property
    def small_logo_attribute(self) -> str:
        return self.value[1]

    @property
    def visual_elements_tag(self) -> str:
        return f'{{{self.namespace}}}VisualElements'

    @classmethod
    def probe_order(cls) -> tuple['SchemaVariant', ...]:
        # newest first
        return (cls.UAP, cls.WIN81)
