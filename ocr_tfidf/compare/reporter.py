from __future__ import annotations
from typing import List, Protocol

from ocr_tfidf.compare.model import ComparisonItem, ItemResult


class Reporter(Protocol):
    def on_start(self, items: List[ComparisonItem]) -> None: ...
    def on_engine_unavailable(self, error: str) -> None: ...
    def on_item_start(self, item: ComparisonItem) -> None: ...
    def on_item_result(self, result: ItemResult) -> None: ...
    def on_item_failed(self, result: ItemResult) -> None: ...
    def on_finish(self, results: List[ItemResult]) -> None: ...


class NoOpReporter:
    def on_start(self, items: List[ComparisonItem]) -> None: pass
    def on_engine_unavailable(self, error: str) -> None: pass
    def on_item_start(self, item: ComparisonItem) -> None: pass
    def on_item_result(self, result: ItemResult) -> None: pass
    def on_item_failed(self, result: ItemResult) -> None: pass
    def on_finish(self, results: List[ItemResult]) -> None: pass
