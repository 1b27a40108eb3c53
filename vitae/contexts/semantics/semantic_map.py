"""
Semantic map of a canvas.

A flat, top-to-bottom listing of every text element with its tag (explicit or
inferred), used for outlines and for locating an element again from a tag and
a piece of text (e.g. when an edit suggestion quotes part of a paragraph).
"""

import re
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, Template

from vitae.contexts.schema.elements import TextElement, VisualElement
from vitae.contexts.semantics.grouping import detect_section_header
from vitae.contexts.semantics.inference import infer_tag
from vitae.contexts.semantics.logger import _log_debug
from vitae.contexts.vocabulary.labels import get_category_label, get_semantic_type_label
from vitae.contexts.vocabulary.semantic_types import get_semantic_category, is_section_header_type

TEMPLATES_DIR = Path(__file__).parent / "templates"
SEMANTIC_MAP_TEMPLATE = "semantic_map.txt.jinja"

PREVIEW_LENGTH = 70

# find_element thresholds
FIRST_LINE_MIN_LENGTH = 20
FIRST_LINE_MAX_LENGTH = 100
FIRST_WORDS_COUNT = 8
FIRST_WORDS_MIN_LENGTH = 15
CONTAINED_MIN_LENGTH = 30
OVERLAP_MIN_WORD_LENGTH = 4
OVERLAP_MIN_WORDS = 5
OVERLAP_MIN_SCORE = 0.6

_WORDS = re.compile(r"\s+")


@dataclass
class SemanticMapEntry:
    id: str
    text: str
    semantic_type: str
    semantic_group: Optional[str] = None
    top: float = 0.0
    left: float = 0.0
    font_size: float = 12
    font_weight: str = "normal"

    @property
    def category(self) -> str:
        return get_semantic_category(self.semantic_type)

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "text": self.text,
            "semanticType": self.semantic_type,
            "semanticGroup": self.semantic_group,
            "position": {"top": self.top, "left": self.left},
            "fontSize": self.font_size,
            "fontWeight": self.font_weight,
        }


@dataclass
class SemanticMap:
    """
    Attributes:
        entries: One entry per non-empty selectable text element, top-to-bottom
        full_text: Entry texts joined by blank lines
        section_headers: Uppercased header texts in reading order
    """

    entries: List[SemanticMapEntry] = field(default_factory=list)
    full_text: str = ""
    section_headers: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            "entries": [e.to_dict() for e in self.entries],
            "fullText": self.full_text,
            "sectionHeaders": list(self.section_headers),
        }


def extract_semantic_map(elements: Sequence[VisualElement]) -> SemanticMap:
    """
    Build the semantic map of a canvas without modifying it.

    Untagged elements are listed with their inferred tag; non-selectable
    elements and shapes are skipped.
    """
    entries: List[SemanticMapEntry] = []
    headers: List[tuple] = []

    for element in elements:
        if getattr(element, "kind", None) != "text" or not element.selectable:
            continue
        text = (element.text or "").strip()
        if not text:
            continue
        semantic_type = element.semantic_type or infer_tag(element)
        entries.append(
            SemanticMapEntry(
                id=element.id,
                text=text,
                semantic_type=semantic_type,
                semantic_group=element.semantic_group,
                top=element.top,
                left=element.left,
                font_size=element.font_size,
                font_weight=str(element.font_weight),
            )
        )
        if is_section_header_type(semantic_type) or detect_section_header(element):
            headers.append((element.top, element.left, text.upper()))

    entries.sort(key=lambda e: e.top)
    headers.sort(key=lambda h: (h[0], h[1]))
    return SemanticMap(
        entries=entries,
        full_text="\n\n".join(e.text for e in entries),
        section_headers=[h[2] for h in headers],
    )


class OutlineTemplateRegistry:
    """
    Loads and caches the Jinja2 templates used for text outlines.

    Templates live in vitae/contexts/semantics/templates/.
    """

    def __init__(self, templates_dir: Path = None):
        self.templates_dir = templates_dir or TEMPLATES_DIR
        self._cache: Dict[str, Template] = {}
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def get_template(self, name: str) -> Template:
        """
        Get a template by file name, loading and caching it if necessary.

        Raises:
            TemplateNotFound: If the template file doesn't exist
        """
        if name not in self._cache:
            self._cache[name] = self.env.get_template(name)
            _log_debug(f"Loaded outline template {name}")
        return self._cache[name]

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, name: str) -> bool:
        return name in self._cache


@lru_cache(maxsize=1)
def default_outline_registry() -> OutlineTemplateRegistry:
    """Shared registry for the packaged outline templates."""
    return OutlineTemplateRegistry()


def _preview(text: str) -> str:
    flat = " ".join(text.split())
    return flat if len(flat) <= PREVIEW_LENGTH else flat[: PREVIEW_LENGTH - 1] + "…"


def format_semantic_map(
    semantic_map: SemanticMap,
    locale: str = "en",
    registry: OutlineTemplateRegistry = None,
) -> str:
    """
    Render a semantic map as a plain-text outline grouped by category.

    Consecutive entries of the same category form one block, so a two-column
    canvas shows its sections in top-to-bottom order.

    Args:
        semantic_map: Map from ``extract_semantic_map``
        locale: Label language
        registry: Template registry (defaults to the packaged templates)

    Returns:
        Outline text
    """
    blocks: List[Dict] = []
    for entry in semantic_map.entries:
        if not blocks or blocks[-1]["category"] != entry.category:
            blocks.append(
                {"category": entry.category, "label": get_category_label(entry.category, locale), "entries": []}
            )
        blocks[-1]["entries"].append(
            {
                "label": get_semantic_type_label(entry.semantic_type, locale),
                "group": entry.semantic_group,
                "top": entry.top,
                "preview": _preview(entry.text),
            }
        )

    template = (registry or default_outline_registry()).get_template(SEMANTIC_MAP_TEMPLATE)
    return template.render(
        entry_count=len(semantic_map.entries),
        section_headers=semantic_map.section_headers,
        blocks=blocks,
    )


# =============================================================================
# ELEMENT LOOKUP
# =============================================================================


def _normalized(element: TextElement) -> str:
    return (element.text or "").strip().lower()


def _significant_words(text: str) -> set:
    return {w for w in _WORDS.split(text) if len(w) >= OVERLAP_MIN_WORD_LENGTH}


def find_element(
    elements: Sequence[VisualElement],
    semantic_type: Optional[str] = None,
    text: Optional[str] = None,
) -> Optional[VisualElement]:
    """
    Locate an element from a tag and (possibly partial) text.

    Text is more reliable than the tag, so text strategies run first, most
    precise to least:

    1. Exact text (case-insensitive)
    2. Same first line (first line longer than 20 chars)
    3. Same first 8 words (longer than 15 chars)
    4. Search text contained in the element text
    5. Element text (30+ chars) contained in the search text
    6. At least 60% overlap of significant words (5+ words on both sides)
    7. Tag only: first element with that tag

    Args:
        elements: Canvas elements
        semantic_type: Tag (or element id) to fall back on
        text: Text to look for

    Returns:
        Matching element or None
    """
    texts = [e for e in elements if getattr(e, "kind", None) == "text"]

    if text and text.strip():
        search = text.strip().lower()
        first_line = search.split("\n")[0][:FIRST_LINE_MAX_LENGTH]
        first_words = " ".join(_WORDS.split(search)[:FIRST_WORDS_COUNT])

        strategies = (
            lambda t: t == search,
            lambda t: len(first_line) > FIRST_LINE_MIN_LENGTH
            and t.split("\n")[0][:FIRST_LINE_MAX_LENGTH] == first_line,
            lambda t: len(first_words) > FIRST_WORDS_MIN_LENGTH
            and " ".join(_WORDS.split(t)[:FIRST_WORDS_COUNT]) == first_words,
            lambda t: len(t) >= len(search) and search in t,
            lambda t: len(t) >= CONTAINED_MIN_LENGTH and t in search,
        )
        for strategy in strategies:
            for element in texts:
                if strategy(_normalized(element)):
                    return element

        search_words = _significant_words(search)
        if len(search_words) >= OVERLAP_MIN_WORDS:
            best, best_score = None, OVERLAP_MIN_SCORE
            for element in texts:
                words = _significant_words(_normalized(element))
                if len(words) < OVERLAP_MIN_WORDS:
                    continue
                score = len(search_words & words) / min(len(search_words), len(words))
                if score > best_score:
                    best, best_score = element, score
            if best is not None:
                return best

    if semantic_type:
        for element in elements:
            if element.id == semantic_type or element.semantic_type == semantic_type:
                return element
    return None
