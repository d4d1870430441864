#!/usr/bin/env python3
# /// script
# requires-python = ">=3.12"
# dependencies = ["beautifulsoup4", "lxml"]
# ///

"""
SPDX-License-Identifier: LicenseRef-NonCommercial-Only
© 2025 github.com/defmon3 — Non-commercial use only. Commercial use requires permission.

sanitize.py – HTML sanitization utilities.
"""

import logging
import os
import re

from bs4 import BeautifulSoup, FeatureNotFound, NavigableString, Tag
from bs4.dammit import EntitySubstitution
from bs4.element import PreformattedString
from bs4.formatter import HTMLFormatter

from cleanup_html.urls import URLDecodeError, unwrap_redirect

log = logging.getLogger(__name__)

DEFAULT_PARSER = os.environ.get("CLEANUP_HTML_PARSER", "lxml")
FALLBACK_PARSER = "html.parser"

STRIP_ATTRIBUTES = ("class", "id")
STRIP_ELEMENTS = ["style", "meta", "title", "head"]

MARKUP = re.compile(r"<[A-Za-z!/?]")
BETWEEN_TAGS = re.compile(r">\s+<")
WHITESPACE_RUN = re.compile(r"\s{2,}")


def _substitute_entities(value: str) -> str:
    return EntitySubstitution.substitute_xml(value).replace("\xa0", "&nbsp;")


# Escapes like a browser's innerHTML and writes void elements as <br>.
INNER_HTML = HTMLFormatter(
    entity_substitution=_substitute_entities,
    void_element_close_prefix=None,
)


def parse(text: str, parser: str = DEFAULT_PARSER) -> BeautifulSoup | None:
    """
    Parse ``text`` into a mutable document tree.

    :param text: Raw HTML.
    :param parser: BeautifulSoup tree builder feature; falls back to
                   ``html.parser`` when it is not installed.
    :returns: The document, or None when the parser rejects ``text``.
    """
    try:
        try:
            return BeautifulSoup(text, parser)
        except FeatureNotFound:
            log.warning("[sanitize.parse] parser_missing=%s fallback=%s", parser, FALLBACK_PARSER)
            return BeautifulSoup(text, FALLBACK_PARSER)
    except Exception as e:
        log.warning("[sanitize.parse] parse_error: %s", e)
        return None


def strip_attributes(soup: BeautifulSoup) -> None:
    for tag in soup.find_all(True):
        for attr in STRIP_ATTRIBUTES:
            if tag.has_attr(attr):
                del tag[attr]


def strip_elements(soup: BeautifulSoup) -> None:
    for tag in soup(STRIP_ELEMENTS):
        # nested matches go with their decomposed ancestor
        if tag.decomposed:
            continue
        tag.decompose()


def rewrite_links(soup: BeautifulSoup) -> None:
    """Replace Google redirect ``href`` values with their target URL."""
    for tag in soup.find_all(href=True):
        href = tag["href"]
        try:
            tag["href"] = unwrap_redirect(href)
        except URLDecodeError as e:
            log.warning("[sanitize.rewrite_links] keep_href=%s: %s", href, e)


def _child_tags(node: Tag) -> list[Tag]:
    return [child for child in node.contents if isinstance(child, Tag)]


def _has_text(node: Tag) -> bool:
    return any(
        child.strip()
        for child in node.contents
        if isinstance(child, NavigableString) and not isinstance(child, PreformattedString)
    )


def prune_empty(root: Tag) -> int:
    """
    Remove every element below ``root`` that has no text and no child elements.

    Elements are visited in reverse document order, so every subtree is
    resolved before its parent is tested and a single pass also removes
    parents that only held empty elements.
    ``root`` itself is kept even when it ends up empty.

    :param root: Element to start from, usually ``<body>``.
    :returns: Number of top-level subtrees removed from ``root``.
    """
    removed = 0
    for node in reversed([tag for tag in root.descendants if isinstance(tag, Tag)]):
        if node.decomposed or _child_tags(node) or _has_text(node):
            continue
        removed += node.parent is root
        node.decompose()
    return removed


def collapse_whitespace(markup: str) -> str:
    markup = BETWEEN_TAGS.sub("><", markup)
    markup = markup.replace("\n", "")
    return WHITESPACE_RUN.sub(" ", markup)


def clean_html(text: str, parser: str = DEFAULT_PARSER) -> str:
    """
    Sanitize an HTML document and return the inner markup of its body.

    :param text: Raw HTML content.
    :param parser: BeautifulSoup tree builder feature.
    :returns: Cleaned markup with ``class``/``id`` attributes, ``style``,
              ``meta``, ``title`` and ``head`` elements, redirect wrappers and
              empty elements removed, and inter-tag whitespace collapsed.
              Text without markup only gets its whitespace collapsed;
              ``text`` is returned unchanged when it cannot be parsed.
    """
    if not MARKUP.search(text):
        log.debug("[sanitize.clean_html] no_markup len=%d", len(text))
        return collapse_whitespace(text)

    soup = parse(text, parser)
    if soup is None:
        return text

    strip_attributes(soup)
    strip_elements(soup)
    rewrite_links(soup)

    container = soup.body or soup
    removed = prune_empty(container)
    log.debug("[sanitize.clean_html] pruned=%d body=%s", removed, soup.body is not None)

    return collapse_whitespace(container.decode_contents(formatter=INNER_HTML))
