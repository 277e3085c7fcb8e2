"""Request handling shared by the HTTP server, CLI and Streamlit app."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Annotated, Any, Dict, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, HttpUrl, ValidationError

from .config import GeneratorConfig
from .errors import EmptyContentError, FetchError
from .fetcher import ArticleFetcher
from .models import ArticleInput, CallToAction, Tone
from .orchestrator import generate
from .text import normalize_whitespace

LOGGER = logging.getLogger(__name__)

MISSING_SOURCE_MESSAGE = "Provide a blog URL or paste the blog content."
NO_CONTENT_MESSAGE = "Unable to extract content from the blog. Please paste a summary manually."


class GenerationRequest(BaseModel):
    """Incoming payload, using the camelCase keys of the web form."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    url: Union[HttpUrl, Literal[""], None] = None
    fallback_title: Optional[str] = Field(None, alias="fallbackTitle", max_length=160)
    custom_summary: Optional[str] = Field(None, alias="customSummary", max_length=8000)
    tone: Tone
    call_to_action: CallToAction = Field(..., alias="callToAction")
    audience: Optional[str] = Field(None, max_length=160)
    custom_hashtags: Optional[List[Annotated[str, Field(max_length=60)]]] = Field(
        None, alias="customHashtags", max_length=20
    )


@dataclass
class ServiceResponse:
    status: int
    body: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status < 400


def _validation_issues(exc: ValidationError) -> List[Dict[str, str]]:
    return [
        {"field": ".".join(str(part) for part in error["loc"]), "message": error["msg"]}
        for error in exc.errors()
    ]


def handle_generate(
    payload: Mapping[str, Any],
    fetcher: Optional[ArticleFetcher] = None,
    config: Optional[GeneratorConfig] = None,
) -> ServiceResponse:
    """Validate a request, fetch the article if possible and run the generator.

    A failed fetch becomes a warning when pasted text is available to fall
    back on; without any text the response is a 422.
    """

    config = config or GeneratorConfig()
    try:
        request = GenerationRequest.model_validate(payload)
    except ValidationError as exc:
        LOGGER.info("Rejected invalid request: %d issue(s)", exc.error_count())
        return ServiceResponse(400, {"message": "Invalid request payload.", "issues": _validation_issues(exc)})

    # Echo the caller's URL as sent; HttpUrl adds a trailing slash to bare hosts.
    url = str(payload.get("url") or "").strip() if request.url else ""
    if not url and not (request.custom_summary or "").strip():
        return ServiceResponse(400, {"message": MISSING_SOURCE_MESSAGE})

    warnings: List[str] = []
    title = (request.fallback_title or "").strip()
    content = normalize_whitespace(request.custom_summary)

    if url and not config.FEATURE_URL_FETCH:
        warnings.append("Fetching blog URLs is disabled. Using the provided summary.")
    elif url:
        fetcher = fetcher or ArticleFetcher(config)
        try:
            article = fetcher.fetch(url)
            title = article.title or title
            content = article.content or content
        except FetchError as exc:
            fallback = "Falling back to the provided summary." if content else "No fallback text provided."
            LOGGER.warning("Fetch failed for %s: %s", url, exc.reason)
            warnings.append(f"Failed to fetch the blog post. {exc.reason} {fallback}")

    try:
        result = generate(
            ArticleInput(
                title=title,
                body=content,
                tone=request.tone,
                call_to_action=request.call_to_action,
                url=url or None,
                audience=(request.audience or "").strip() or None,
                custom_hashtags=tuple(request.custom_hashtags or ()),
            ),
            config,
        )
    except EmptyContentError:
        return ServiceResponse(422, {"message": NO_CONTENT_MESSAGE, "warnings": warnings})

    body = result.to_dict()
    body.update({"url": url or None, "warnings": warnings})
    return ServiceResponse(200, body)


__all__ = [
    "GenerationRequest",
    "MISSING_SOURCE_MESSAGE",
    "NO_CONTENT_MESSAGE",
    "ServiceResponse",
    "handle_generate",
]
