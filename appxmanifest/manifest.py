import asyncio
import logging
from os import PathLike
from pathlib import Path

from lxml import etree

from appxmanifest.errors import VisualElementsNotFoundError
from appxmanifest.schema import MANIFEST_FILE_NAME, SchemaVariant
from appxmanifest.visual import VisualElement

logger = logging.getLogger(__name__)


class AppManifest:
    def __init__(self, manifest_path: str | PathLike):
        self.manifest_path = Path(manifest_path)
        logger.debug('Reading app manifest %s', self.manifest_path)
        with open(self.manifest_path, 'rb') as f:
            # bytes, so lxml honours the encoding declaration
            self.tree: etree._Element = etree.fromstring(f.read())

    @classmethod
    def from_install_location(cls, install_location: str | PathLike) -> 'AppManifest':
        return cls(Path(install_location) / MANIFEST_FILE_NAME)

    def find_visual_elements(self, variant: SchemaVariant | None = None) -> tuple[etree._Element, SchemaVariant]:
        """First VisualElements in document order, with the schema variant it matched.

        Without a variant the known namespaces are probed newest first. Only the
        first application of a multi-app package is considered.
        """
        candidates = (variant,) if variant is not None else SchemaVariant.probe_order()
        for candidate in candidates:
            element = next(self.tree.iter(candidate.visual_elements_tag), None)
            if element is not None:
                logger.debug('Found VisualElements using the %s schema', candidate.name)
                return element, candidate
            logger.debug('No VisualElements in the %s namespace', candidate.name)
        raise VisualElementsNotFoundError()

    def visual_element(self, variant: SchemaVariant | None = None) -> VisualElement:
        element, matched = self.find_visual_elements(variant)
        return VisualElement.from_element(element, matched)


def read_visual_element_sync(install_location: str | PathLike,
                             variant: SchemaVariant | None = None) -> VisualElement:
    return AppManifest.from_install_location(install_location).visual_element(variant)


async def read_visual_element(install_location: str | PathLike,
                              variant: SchemaVariant | None = None) -> VisualElement:
    """Read the VisualElements of the package installed at ``install_location``.

    The manifest is re-read and re-parsed on every call. File and XML errors
    propagate unchanged.
    """
    return await asyncio.to_thread(read_visual_element_sync, install_location, variant)
