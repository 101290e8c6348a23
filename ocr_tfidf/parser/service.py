import re
from pathlib import Path
from typing import List, Optional, Union

from ocr_tfidf import logging
from ocr_tfidf.compare.model import ComparisonItem

logger = logging.get_logger(__name__)

IMAGE_SUFFIXES = {".png", ".jpg", ".jpeg", ".tif", ".tiff", ".bmp"}
_numbered_stem = re.compile(r"^(?P<prefix>.+)_(?P<number>\d+)$")


class ParserService:
    """Pairs every image in a folder with its reference translation."""

    def reference_candidates(self, image_path: Path) -> List[Path]:
        """
        test_image.jpeg -> test_image.txt
        test_OCR_1.jpg  -> test_OCR_1.txt, test_OCR_trad_1.txt
        """
        folder, stem = image_path.parent, image_path.stem
        candidates = [folder / f"{stem}.txt"]
        match = _numbered_stem.match(stem)
        if match:
            candidates.append(folder / f"{match['prefix']}_trad_{match['number']}.txt")
        return candidates

    def find_reference(self, image_path: Path) -> Optional[Path]:
        for candidate in self.reference_candidates(image_path):
            if candidate.is_file():
                return candidate
        return None

    def parse(self, dataset_path: Union[str, Path], result_dir: Union[str, Path]) -> List[ComparisonItem]:
        folder = Path(dataset_path)
        result_root = Path(result_dir)
        if not folder.is_dir():
            logger.error(f"Dataset folder not found: {folder}")
            return []

        images = sorted(p for p in folder.iterdir() if p.is_file() and p.suffix.lower() in IMAGE_SUFFIXES)

        items: List[ComparisonItem] = []
        for image in images:
            reference = self.find_reference(image)
            if reference is None:
                logger.warning(f"No reference translation for {image.name}; skipping")
                continue
            items.append(ComparisonItem(
                name=image.stem,
                image_path=image,
                reference_path=reference,
                result_path=result_root / f"result_{image.stem.lower()}.txt",
            ))
        return items
