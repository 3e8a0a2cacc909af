"""Turns a YouTube Music search response into categorised shelf sections.

Two response layouts exist:

* a fresh search: ``contents.sectionListRenderer.contents[]``, one entry per
  shelf (usually wrapped in ``musicShelfRenderer``), each with a title;
* a continuation: ``continuationContents.musicShelfContinuation`` (or
  ``sectionListContinuation``), a single untitled shelf.

Every item is a ``musicResponsiveListItemRenderer`` whose ``flexColumns``
are flattened into positional text "tags".  On a fresh search the second
tag is the item's type ("Song", "Video", ...); rows of a continuation page
have no such column, so the caller passes the type in as an override.

Item-level failures are isolated: a malformed row is skipped, logged and
counted in ``ShelfSection.skipped`` while its siblings are still parsed.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pydantic

from tracksource.models.candidates import CandidateRecord, build_candidate
from tracksource.models.shelf import (
    ShelfCategory,
    ShelfCursor,
    ShelfSection,
    category_for,
    category_key,
    singularize,
)
from tracksource.utils.errors import ShelfParseError
from tracksource.utils.logging import get_logger


class ShelfParser:
    """Stateless parser; one instance can be shared by every request."""

    def __init__(self, provider_name: str = "yt_music") -> None:
        self._provider_name = provider_name
        self._logger = get_logger(__name__)

    def parse(
        self,
        response: Mapping[str, Any],
        type_override: str | None = None,
    ) -> dict[str, ShelfSection]:
        """Parse *response* into ``{category_key: ShelfSection}``.

        Parameters
        ----------
        response:
            Decoded JSON of one search or continuation request.
        type_override:
            Item type to apply to every row instead of reading it from the
            row's second column.  Set when following a cursor.

        Raises
        ------
        ShelfParseError
            If the response has neither known top-level layout.
        """
        sections: dict[str, ShelfSection] = {}
        for layer in self._shelves(response):
            label = self._label(layer)
            key = category_key(label)
            if key in sections:
                self._logger.debug("shelf_key_collision", key=key)
            sections[key] = self._parse_shelf(layer, label, type_override)
        return sections

    # ------------------------------------------------------------------
    # Layout helpers
    # ------------------------------------------------------------------

    def _shelves(self, response: Mapping[str, Any]) -> list[Mapping[str, Any]]:
        if "continuationContents" in response:
            continuation = response["continuationContents"] or {}
            shelf = continuation.get("musicShelfContinuation") or continuation.get(
                "sectionListContinuation"
            )
            if shelf is None:
                raise ShelfParseError(
                    "continuation response carries no shelf", provider_name=self._provider_name
                )
            return [shelf]

        try:
            raw_sections = response["contents"]["sectionListRenderer"]["contents"]
        except (KeyError, TypeError) as exc:
            raise ShelfParseError(
                f"search response has no section list: missing {exc}",
                provider_name=self._provider_name,
            ) from exc
        return [section.get("musicShelfRenderer") or section for section in raw_sections]

    @staticmethod
    def _label(layer: Mapping[str, Any]) -> str | None:
        title = layer.get("title")
        if not isinstance(title, Mapping):
            return None
        runs = title.get("runs") or []
        if not isinstance(runs, list) or not runs or not isinstance(runs[0], Mapping):
            return None
        return runs[0].get("text")

    def _parse_shelf(
        self,
        layer: Mapping[str, Any],
        label: str | None,
        type_override: str | None,
    ) -> ShelfSection:
        category = category_for(label)
        items: list[CandidateRecord] = []
        skipped = 0

        for index, content in enumerate(layer.get("contents") or []):
            try:
                items.append(self._parse_item(content, type_override))
            except ShelfParseError as exc:
                skipped += 1
                self._logger.warning(
                    "shelf_item_skipped",
                    shelf=label or "other",
                    index=index,
                    reason=exc.message,
                )

        continuation, expansion = self._cursors(layer, category, label, type_override)
        return ShelfSection(
            category=category,
            label=label,
            items=tuple(items),
            continuation=continuation,
            expansion=expansion,
            skipped=skipped,
        )

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------

    def _parse_item(self, content: Mapping[str, Any], type_override: str | None) -> CandidateRecord:
        renderer = content.get("musicResponsiveListItemRenderer") if isinstance(content, Mapping) else None
        if not isinstance(renderer, Mapping) or not renderer:
            raise ShelfParseError("item has no musicResponsiveListItemRenderer")

        tags = self._flatten_columns(renderer)
        if type_override:
            kind: str | None = type_override
        elif len(tags) > 1:
            kind = tags.pop(1)
        else:
            kind = None

        double_tap = renderer.get("doubleTapCommand") or {}
        if not isinstance(double_tap, Mapping):
            raise ShelfParseError(f"{kind} item has a malformed doubleTapCommand")
        try:
            return build_candidate(
                kind,
                tags,
                watch=double_tap.get("watchEndpoint"),
                watch_playlist=double_tap.get("watchPlaylistEndpoint"),
            )
        except KeyError as exc:
            raise ShelfParseError(f"{kind} item has no {exc.args[0]} link") from exc
        except pydantic.ValidationError as exc:
            raise ShelfParseError(f"{kind} item has an unusable link: {exc.error_count()} error(s)") from exc

    @staticmethod
    def _flatten_columns(renderer: Mapping[str, Any]) -> list[str]:
        """Join each flex column's text runs into one string per column."""
        columns = renderer.get("flexColumns")
        if not columns or not isinstance(columns, list):
            raise ShelfParseError("item has no flexColumns")
        tags: list[str] = []
        for index, column in enumerate(columns):
            try:
                text = column["musicResponsiveListItemFlexColumnRenderer"]["text"]
            except (KeyError, TypeError) as exc:
                raise ShelfParseError(f"flex column {index} missing {exc}") from exc
            if not isinstance(text, Mapping):
                raise ShelfParseError(f"flex column {index} has no text")
            runs = text.get("runs") or []
            if not isinstance(runs, list):
                raise ShelfParseError(f"flex column {index} has malformed runs")
            parts: list[str] = []
            for run in runs:
                if not isinstance(run, Mapping) or not isinstance(run.get("text", ""), str):
                    raise ShelfParseError(f"flex column {index} has a malformed run")
                parts.append(run.get("text", ""))
            tags.append("".join(parts))
        return tags

    # ------------------------------------------------------------------
    # Pagination
    # ------------------------------------------------------------------

    @staticmethod
    def _cursors(
        layer: Mapping[str, Any],
        category: ShelfCategory,
        label: str | None,
        type_override: str | None,
    ) -> tuple[ShelfCursor | None, ShelfCursor | None]:
        # The top result is a single pick; it is never paginated.
        if category is ShelfCategory.TOP:
            return None, None

        item_type = type_override or (singularize(label) if label else None)

        continuation: ShelfCursor | None = None
        raw_continuations = layer.get("continuations") or []
        if raw_continuations:
            data = raw_continuations[0].get("nextContinuationData") or {}
            token = data.get("continuation")
            if token:
                params = {"continuation": token}
                if data.get("clickTrackingParams"):
                    params = {"icit": data["clickTrackingParams"], **params}
                continuation = ShelfCursor(
                    kind="continuation", type_override=item_type, params=params
                )

        expansion: ShelfCursor | None = None
        search_endpoint = (layer.get("bottomEndpoint") or {}).get("searchEndpoint")
        if search_endpoint:
            expansion = ShelfCursor(
                kind="expand", type_override=item_type, payload=dict(search_endpoint)
            )

        return continuation, expansion
