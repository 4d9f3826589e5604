import logging
from contextlib import nullcontext
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from tqdm import tqdm
from tqdm.contrib.logging import logging_redirect_tqdm

from .exceptions import ImageMetaError, SidecarWriteError, UsageError
from .metadata.extract import MetadataAssembler
from .serialization import sidecar_path_for, write_sidecar


@dataclass
class BatchResult:
    written: List[Tuple[Path, Path]] = field(default_factory=list)      # (source, sidecar)
    failures: List[Tuple[Path, Exception]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


class BatchRunner:
    def __init__(self, assembler: Optional[MetadataAssembler] = None, show_progress: bool = False):
        self.assembler = assembler or MetadataAssembler()
        self.show_progress = show_progress

    def run(self, paths: Iterable[Union[str, Path]]) -> BatchResult:
        """
        Writes a JSON sidecar next to every readable image in `paths`.

        Paths are handled strictly in order; duplicates are simply processed
        again. A failure for one path is logged and recorded, then the
        batch moves on.
        """
        paths = [Path(p) for p in paths]
        if not paths:
            raise UsageError("Provide at least one path to an image file to read.")

        result = BatchResult()
        # Keep log lines from tearing the progress bar
        redirect = logging_redirect_tqdm() if self.show_progress else nullcontext()
        with redirect:
            for path in tqdm(paths, desc="Reading metadata", unit="file", disable=not self.show_progress):
                try:
                    sidecar = self._process(path)
                except ImageMetaError as e:
                    logging.error(f"Failed to process {path}: {e}")
                    result.failures.append((path, e))
                    continue
                result.written.append((path, sidecar))

        logging.info(f"Wrote {len(result.written)} sidecar(s), {len(result.failures)} failure(s).")
        return result

    def _process(self, path: Path) -> Path:
        record = self.assembler.assemble(path)

        sidecar = sidecar_path_for(path)
        if sidecar == path:
            raise SidecarWriteError(f"Sidecar path {sidecar} would overwrite its own source")

        write_sidecar(record, sidecar)
        logging.debug(f"Wrote {sidecar}")
        return sidecar
