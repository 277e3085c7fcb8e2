"""Best-effort retrieval of blog posts by URL."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import requests
from bs4 import BeautifulSoup

from .config import GeneratorConfig
from .errors import FetchError
from .text import normalize_whitespace

LOGGER = logging.getLogger(__name__)

_NOISE_TAGS = ["script", "style", "noscript", "nav", "header", "footer", "aside", "form", "svg"]
_CONTENT_SELECTORS = ["article", "main", "[role=main]", "body"]


@dataclass(frozen=True)
class FetchedArticle:
    title: str
    content: str


def _extract_title(soup: BeautifulSoup) -> str:
    meta = soup.find("meta", attrs={"property": "og:title"})
    if meta and meta.get("content"):
        return normalize_whitespace(meta["content"])
    if soup.title and soup.title.string:
        return normalize_whitespace(soup.title.string)
    heading = soup.find("h1")
    return normalize_whitespace(heading.get_text(" ")) if heading else ""


def _extract_content(soup: BeautifulSoup) -> str:
    for tag in soup(_NOISE_TAGS):
        tag.decompose()
    for selector in _CONTENT_SELECTORS:
        node = soup.select_one(selector)
        if node is None:
            continue
        paragraphs = [normalize_whitespace(p.get_text(" ")) for p in node.find_all("p")]
        text = " ".join(p for p in paragraphs if p)
        if not text:
            text = normalize_whitespace(node.get_text(" "))
        if text:
            return text
    return ""


def parse_article(html: str) -> FetchedArticle:
    """Pull a title and plain-text body out of an HTML document."""

    soup = BeautifulSoup(html, "html.parser")
    title = _extract_title(soup)
    return FetchedArticle(title=title, content=_extract_content(soup))


class ArticleFetcher:
    """Downloads a page and extracts its article text."""

    def __init__(self, config: Optional[GeneratorConfig] = None, session: Optional[requests.Session] = None):
        self.config = config or GeneratorConfig()
        self.session = session or requests.Session()

    def fetch(self, url: str) -> FetchedArticle:
        LOGGER.info("Fetching article %s", url)
        try:
            response = self.session.get(
                url,
                timeout=self.config.FETCH_TIMEOUT_SECONDS,
                headers={"User-Agent": self.config.FETCH_USER_AGENT, "Accept": "text/html,application/xhtml+xml"},
            )
            response.raise_for_status()
        except requests.Timeout as exc:
            raise FetchError(url, f"Timed out after {self.config.FETCH_TIMEOUT_SECONDS}s.") from exc
        except requests.HTTPError as exc:
            raise FetchError(url, f"The site responded with HTTP {exc.response.status_code}.") from exc
        except requests.RequestException as exc:
            raise FetchError(url, f"Network error: {exc}") from exc

        content_type = response.headers.get("Content-Type", "")
        if "html" not in content_type.lower():
            raise FetchError(url, f"Expected an HTML page but received '{content_type or 'unknown'}'.")

        article = parse_article(response.text)
        if not article.content:
            raise FetchError(url, "No readable article text was found on the page.")
        LOGGER.info("Fetched %d characters from %s", len(article.content), url)
        return article


__all__ = ["ArticleFetcher", "FetchedArticle", "parse_article"]
