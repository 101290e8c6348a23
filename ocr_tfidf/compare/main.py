# main.py
import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional

from ocr_tfidf.compare.logger import SimpleLoggerReporter
from ocr_tfidf.compare.model import DEFAULT_LANG, ItemResult, RunConfig, default_items
from ocr_tfidf.compare.service import CompareUseCase
from ocr_tfidf.logging import configure_logging
from ocr_tfidf.ocr.service import OCRService
from ocr_tfidf.ocr.tesseract_ocr import TesseractOCREngine
from ocr_tfidf.parser.service import ParserService
from ocr_tfidf.preprocess.model import PreprocessConfig
from ocr_tfidf.preprocess.service import PreprocessService


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ocr-tfidf",
        description="OCR images and score them against reference translations (TF-IDF term overlap).",
    )
    parser.add_argument("--base-dir", type=Path, default=Path.cwd())
    parser.add_argument("--items-dir", type=Path, help="default: <base-dir>/OCR_Items")
    parser.add_argument("--result-dir", type=Path, help="default: <base-dir>/result_ocr_python")
    parser.add_argument("--discover", action="store_true",
                        help="pair every image in --items-dir with its .txt translation instead of the fixed items")
    parser.add_argument("--lang", default=DEFAULT_LANG)
    parser.add_argument("--tessdata-dir", type=Path, default=os.environ.get("TESSDATA_PREFIX") or None)
    parser.add_argument("--grayscale", action="store_true")
    parser.add_argument("--contrast", type=float, default=1.0)
    parser.add_argument("--upscale", type=float, default=None)
    parser.add_argument("--binarize", action="store_true")
    parser.add_argument("--report", type=Path, help="write a CSV summary here")
    parser.add_argument("--log-level", default="INFO")
    return parser


def config_from_args(args: argparse.Namespace) -> RunConfig:
    base = args.base_dir.resolve()
    return RunConfig(
        base_dir=base,
        items_dir=args.items_dir or base / "OCR_Items",
        result_dir=args.result_dir or base / "result_ocr_python",
        lang=args.lang,
        tessdata_dir=Path(args.tessdata_dir) if args.tessdata_dir else None,
        discover=args.discover,
        report_path=args.report,
        preprocess=PreprocessConfig(
            grayscale=args.grayscale,
            contrast=args.contrast,
            upscale_factor=args.upscale,
            binarize=args.binarize,
        ),
    )


def format_result(result: ItemResult) -> str:
    if result.ok:
        return f"{result.name}: {result.score}"
    return f"{result.name}: FAILED ({result.error})"


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = config_from_args(args)
        configure_logging(args.log_level)
    except ValueError as e:
        parser.error(str(e))

    if config.discover:
        items = ParserService().parse(config.items_dir, config.result_dir)
    else:
        items = default_items(config.items_dir, config.result_dir)

    engine = TesseractOCREngine(lang=config.lang, tessdata_dir=config.tessdata_dir)
    ocr_service = OCRService(engine, preprocessor=PreprocessService(config.preprocess))
    use_case = CompareUseCase(ocr_service, reporter=SimpleLoggerReporter())

    results = use_case.run(items, report_path=config.report_path)

    for result in results:
        print(format_result(result))

    return 0 if results and all(r.ok for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
