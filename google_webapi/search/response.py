"""Custom Search response records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class Facet:
    """A refinement label that can be appended to the query."""

    label: str | None
    anchor: str | None
    label_with_op: str | None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Facet:
        return cls(
            label=data.get("label"),
            anchor=data.get("anchor"),
            label_with_op=data.get("label_with_op"),
        )


@dataclass(slots=True)
class Context:
    """
    Metadata about the search engine that served the query.

    ``facets`` is a list of facet groups, each a list of refinements.
    """

    title: str | None
    facets: tuple[tuple[Facet, ...], ...]

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> Context | None:
        if data is None:
            return None
        return cls(
            title=data.get("title"),
            facets=tuple(
                tuple(Facet.from_dict(f) for f in group)
                for group in data.get("facets") or ()
            ),
        )


@dataclass(slots=True)
class QueryInfo:
    """Describes a request, next page or previous page query."""

    title: str | None
    total_results: int | None
    search_terms: str | None
    count: int | None
    start_index: int | None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> QueryInfo:
        total = data.get("totalResults")
        return cls(
            title=data.get("title"),
            # Sent as a string by the API
            total_results=int(total) if total is not None else None,
            search_terms=data.get("searchTerms"),
            count=data.get("count"),
            start_index=data.get("startIndex"),
        )


@dataclass(slots=True)
class SearchInformation:
    """Timing and totals for the search."""

    search_time: float | None
    formatted_search_time: str | None
    total_results: int | None
    formatted_total_results: str | None

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> SearchInformation | None:
        if data is None:
            return None
        total = data.get("totalResults")
        return cls(
            search_time=data.get("searchTime"),
            formatted_search_time=data.get("formattedSearchTime"),
            total_results=int(total) if total is not None else None,
            formatted_total_results=data.get("formattedTotalResults"),
        )


@dataclass(slots=True)
class Spelling:
    """Spelling suggestion for the query."""

    corrected_query: str | None
    html_corrected_query: str | None

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> Spelling | None:
        if data is None:
            return None
        return cls(
            corrected_query=data.get("correctedQuery"),
            html_corrected_query=data.get("htmlCorrectedQuery"),
        )


@dataclass(slots=True)
class ItemImage:
    """Image metadata attached to image search results."""

    context_link: str | None
    height: int | None
    width: int | None
    byte_size: int | None
    thumbnail_link: str | None

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> ItemImage | None:
        if data is None:
            return None
        return cls(
            context_link=data.get("contextLink"),
            height=data.get("height"),
            width=data.get("width"),
            byte_size=data.get("byteSize"),
            thumbnail_link=data.get("thumbnailLink"),
        )


@dataclass(slots=True)
class Item:
    """A single search result."""

    kind: str | None
    title: str | None
    html_title: str | None
    link: str | None
    display_link: str | None
    snippet: str | None
    html_snippet: str | None
    mime: str | None = None
    file_format: str | None = None
    image: ItemImage | None = None
    labels: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Item:
        return cls(
            kind=data.get("kind"),
            title=data.get("title"),
            html_title=data.get("htmlTitle"),
            link=data.get("link"),
            display_link=data.get("displayLink"),
            snippet=data.get("snippet"),
            html_snippet=data.get("htmlSnippet"),
            mime=data.get("mime"),
            file_format=data.get("fileFormat"),
            image=ItemImage.from_dict(data.get("image")),
            labels=tuple(
                label.get("name") for label in data.get("labels") or ()
            ),
        )


@dataclass(slots=True)
class SearchResponse:
    """Top level Custom Search response."""

    kind: str | None
    url_template: str | None
    queries: dict[str, tuple[QueryInfo, ...]]
    context: Context | None
    search_information: SearchInformation | None
    spelling: Spelling | None
    items: tuple[Item, ...]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SearchResponse:
        """Build the record tree from decoded JSON."""
        return cls(
            kind=data.get("kind"),
            url_template=(data.get("url") or {}).get("template"),
            queries={
                name: tuple(QueryInfo.from_dict(q) for q in entries)
                for name, entries in (data.get("queries") or {}).items()
            },
            context=Context.from_dict(data.get("context")),
            search_information=SearchInformation.from_dict(
                data.get("searchInformation")
            ),
            spelling=Spelling.from_dict(data.get("spelling")),
            items=tuple(Item.from_dict(i) for i in data.get("items") or ()),
        )

    @property
    def next_start_index(self) -> int | None:
        """Return ``startIndex`` of the next page, if any."""
        pages = self.queries.get("nextPage") or ()
        return pages[0].start_index if pages else None
