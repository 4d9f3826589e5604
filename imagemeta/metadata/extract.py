import logging
from pathlib import Path
from typing import Optional

from .. import config
from ..models import ImageAttributes, MetadataRecord
from ..scanning.filesystem import FileAttributeReader
from .codecs import decode_capture_time, decode_orientation, decode_text
from .container import TagContainerReader


class MetadataAssembler:
    """
    Builds one MetadataRecord per file.

    Steps:
      1. File attributes (fatal on failure: not a regular file / unreadable).
      2. EXIF container (fatal on failure: not an image we can read).
      3. Field decoding (never fatal; bad fields come back absent).
    """

    def __init__(self,
                 file_reader: Optional[FileAttributeReader] = None,
                 container_reader: Optional[TagContainerReader] = None):
        self.file_reader = file_reader or FileAttributeReader()
        self.container_reader = container_reader or TagContainerReader()

    def assemble(self, path: Path) -> MetadataRecord:
        path = Path(path)
        file_attrs = self.file_reader.read(path)
        tags = self.container_reader.open(path)

        source = str(path)
        image_attrs = ImageAttributes(
            orientation=decode_orientation(tags, source),
            capture_time=decode_capture_time(tags, source),
            camera_model=decode_text(tags, config.CAMERA_MODEL_TAG, source),
            camera_serial=decode_text(tags, config.CAMERA_SERIAL_TAG, source),
        )
        logging.debug(f"Assembled metadata for {path}: {image_attrs}")
        return MetadataRecord(file=file_attrs, image=image_attrs)
