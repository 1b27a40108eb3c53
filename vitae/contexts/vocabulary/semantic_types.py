"""
Semantic tag vocabulary for resume canvas elements.

Every content-bearing element on the canvas carries one tag from this vocabulary,
and every tag belongs to exactly one category. Categories drive styling, section
routing during template switching, and formatting roles.

Examples:
    >>> get_semantic_category("experience_title")
    'experience'
    >>> get_semantic_category(None)
    'custom'
    >>> is_semantic_type("skill_list")
    True
"""

from typing import Any, Dict, Optional, Tuple

# =============================================================================
# CATEGORIES
# =============================================================================

SEMANTIC_CATEGORIES: Tuple[str, ...] = (
    "personal",
    "contact",
    "summary",
    "experience",
    "education",
    "skills",
    "languages",
    "certifications",
    "projects",
    "awards",
    "publications",
    "volunteer",
    "interests",
    "references",
    "courses",
    "memberships",
    "patents",
    "military",
    "layout",
    "custom",
)

# =============================================================================
# TAGS PER CATEGORY
# =============================================================================

SEMANTIC_TYPES_BY_CATEGORY: Dict[str, Tuple[str, ...]] = {
    "personal": ("name", "first_name", "last_name", "title", "photo"),
    "contact": (
        "contact_section",
        "email",
        "phone",
        "location",
        "address",
        "linkedin",
        "github",
        "website",
        "portfolio",
        "twitter",
        "instagram",
        "facebook",
        "youtube",
        "dribbble",
        "behance",
        "medium",
        "stackoverflow",
        "skype",
        "telegram",
        "whatsapp",
        "discord",
        "custom_link",
    ),
    "summary": ("summary_section", "summary", "objective", "headline"),
    "experience": (
        "experience_section",
        "experience_title",
        "experience_company",
        "experience_location",
        "experience_start_date",
        "experience_end_date",
        "experience_dates",
        "experience_description",
        "experience_achievements",
        "experience_technologies",
    ),
    "education": (
        "education_section",
        "education_degree",
        "education_field",
        "education_institution",
        "education_location",
        "education_start_date",
        "education_end_date",
        "education_dates",
        "education_gpa",
        "education_honors",
        "education_description",
        "education_thesis",
    ),
    "skills": (
        "skills_section",
        "skill",
        "skill_category",
        "skill_list",
        "skill_level",
        "technical_skills",
        "soft_skills",
        "tools",
        "frameworks",
        "programming_languages",
    ),
    "languages": ("languages_section", "language", "language_level", "language_entry"),
    "certifications": (
        "certifications_section",
        "certification_name",
        "certification_issuer",
        "certification_date",
        "certification_expiry",
        "certification_id",
        "certification_url",
    ),
    "projects": (
        "projects_section",
        "project_name",
        "project_role",
        "project_description",
        "project_technologies",
        "project_url",
        "project_github",
        "project_dates",
        "project_achievements",
    ),
    "awards": ("awards_section", "award_name", "award_issuer", "award_date", "award_description"),
    "publications": (
        "publications_section",
        "publication_title",
        "publication_authors",
        "publication_journal",
        "publication_date",
        "publication_url",
        "publication_description",
    ),
    "volunteer": (
        "volunteer_section",
        "volunteer_role",
        "volunteer_organization",
        "volunteer_location",
        "volunteer_dates",
        "volunteer_description",
    ),
    "interests": ("interests_section", "interest", "interests_list"),
    "references": (
        "references_section",
        "reference_name",
        "reference_title",
        "reference_company",
        "reference_email",
        "reference_phone",
        "reference_relationship",
        "references_available",
    ),
    "courses": (
        "courses_section",
        "course_name",
        "course_provider",
        "course_date",
        "course_certificate",
    ),
    "memberships": (
        "memberships_section",
        "membership_organization",
        "membership_role",
        "membership_dates",
    ),
    "patents": (
        "patents_section",
        "patent_title",
        "patent_number",
        "patent_date",
        "patent_description",
    ),
    "military": (
        "military_section",
        "military_branch",
        "military_rank",
        "military_dates",
        "military_description",
    ),
    "layout": ("section_header", "divider", "spacer", "icon", "background"),
    "custom": ("custom_text", "custom_shape"),
}

SEMANTIC_CATEGORY_MAP: Dict[str, str] = {
    tag: category for category, tags in SEMANTIC_TYPES_BY_CATEGORY.items() for tag in tags
}

ALL_SEMANTIC_TYPES: Tuple[str, ...] = tuple(SEMANTIC_CATEGORY_MAP)

# Section header tag for each content category that has one
SECTION_HEADER_TYPES: Dict[str, str] = {
    category: f"{category}_section"
    for category, tags in SEMANTIC_TYPES_BY_CATEGORY.items()
    if f"{category}_section" in tags
}


def get_semantic_category(semantic_type: Optional[str]) -> str:
    """Category of a tag; unknown or missing tags belong to "custom"."""
    if not semantic_type:
        return "custom"
    return SEMANTIC_CATEGORY_MAP.get(semantic_type, "custom")


def is_semantic_type(value: Any) -> bool:
    """Check whether a value is a tag from the vocabulary."""
    return isinstance(value, str) and value in SEMANTIC_CATEGORY_MAP


def is_section_header_type(semantic_type: Optional[str]) -> bool:
    """Check whether a tag marks a section header (``*_section`` or ``section_header``)."""
    if not semantic_type:
        return False
    return semantic_type == "section_header" or (
        semantic_type.endswith("_section") and semantic_type in SEMANTIC_CATEGORY_MAP
    )


def has_semantic_type(element: Any) -> bool:
    """Check whether an element carries a known tag."""
    return is_semantic_type(getattr(element, "semantic_type", None))


def get_types_for_category(category: str) -> Tuple[str, ...]:
    """All tags of a category, empty for unknown categories."""
    return SEMANTIC_TYPES_BY_CATEGORY.get(category, ())
