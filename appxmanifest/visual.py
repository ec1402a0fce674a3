from dataclasses import dataclass
from os import PathLike
from pathlib import Path, PurePosixPath

from lxml import etree

from appxmanifest.color import Color, parse_color
from appxmanifest.errors import MissingAttributeError
from appxmanifest.schema import (
    APP_URI_PREFIX,
    BACKGROUND_COLOR_ATTRIBUTE,
    DESCRIPTION_ATTRIBUTE,
    DISPLAY_NAME_ATTRIBUTE,
    LOGO_ATTRIBUTE,
    SchemaVariant,
)


def app_uri(path: str) -> str:
    """Package-relative ``ms-appx:///`` URI for a manifest asset path."""
    return APP_URI_PREFIX + path.replace('\\', '/')


def asset_path(install_location: str | PathLike, uri: str) -> Path:
    """Filesystem path of an ``ms-appx:///`` URI or raw manifest path inside the install location."""
    relative = uri[len(APP_URI_PREFIX):] if uri.startswith(APP_URI_PREFIX) else uri
    return Path(install_location).joinpath(*PurePosixPath(relative.replace('\\', '/')).parts)


def _required(element: etree._Element, name: str) -> str:
    value = element.get(name)
    if value is None:
        raise MissingAttributeError(name)
    return value


@dataclass(frozen=True)
class VisualElement:
    display_name: str
    description: str
    logo_path: str
    small_logo_path: str
    background_color_raw: str
    variant: SchemaVariant

    @classmethod
    def from_element(cls, element: etree._Element, variant: SchemaVariant) -> 'VisualElement':
        # TODO: DisplayName/Description may be ms-resource: references into resources.pri
        return cls(
            display_name=_required(element, DISPLAY_NAME_ATTRIBUTE),
            description=_required(element, DESCRIPTION_ATTRIBUTE),
            logo_path=_required(element, LOGO_ATTRIBUTE),
            small_logo_path=_required(element, variant.small_logo_attribute),
            background_color_raw=_required(element, BACKGROUND_COLOR_ATTRIBUTE),
            variant=variant,
        )

    @property
    def logo_uri(self) -> str:
        return app_uri(self.logo_path)

    @property
    def small_logo_uri(self) -> str:
        return app_uri(self.small_logo_path)

    @property
    def background_color(self) -> Color:
        return parse_color(self.background_color_raw)
