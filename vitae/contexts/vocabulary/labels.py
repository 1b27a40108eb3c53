"""
Human-readable labels for tags, categories and rendered section headers.

Tag and category labels exist in English and Ukrainian. Rendered section headers
also have a German variant, used by the EU templates.
"""

from typing import Dict, Tuple

# tag -> (en, uk)
_TAG_LABELS: Dict[str, Tuple[str, str]] = {
    # personal
    "name": ("Full Name", "Повне ім'я"),
    "first_name": ("First Name", "Ім'я"),
    "last_name": ("Last Name", "Прізвище"),
    "title": ("Job Title", "Посада"),
    "photo": ("Photo", "Фото"),
    # contact
    "contact_section": ("Contact", "Контакти"),
    "email": ("Email", "Email"),
    "phone": ("Phone", "Телефон"),
    "location": ("Location", "Місто"),
    "address": ("Address", "Адреса"),
    "linkedin": ("LinkedIn", "LinkedIn"),
    "github": ("GitHub", "GitHub"),
    "website": ("Website", "Веб-сайт"),
    "portfolio": ("Portfolio", "Портфоліо"),
    "twitter": ("Twitter/X", "Twitter/X"),
    "instagram": ("Instagram", "Instagram"),
    "facebook": ("Facebook", "Facebook"),
    "youtube": ("YouTube", "YouTube"),
    "dribbble": ("Dribbble", "Dribbble"),
    "behance": ("Behance", "Behance"),
    "medium": ("Medium", "Medium"),
    "stackoverflow": ("Stack Overflow", "Stack Overflow"),
    "skype": ("Skype", "Skype"),
    "telegram": ("Telegram", "Telegram"),
    "whatsapp": ("WhatsApp", "WhatsApp"),
    "discord": ("Discord", "Discord"),
    "custom_link": ("Custom Link", "Інше посилання"),
    # summary
    "summary_section": ("Summary Header", "Заголовок «Про мене»"),
    "summary": ("Summary", "Про мене"),
    "objective": ("Objective", "Мета"),
    "headline": ("Headline", "Заголовок"),
    # experience
    "experience_section": ("Experience", "Досвід роботи"),
    "experience_title": ("Job Title", "Посада"),
    "experience_company": ("Company", "Компанія"),
    "experience_location": ("Location", "Місто"),
    "experience_start_date": ("Start Date", "Дата початку"),
    "experience_end_date": ("End Date", "Дата завершення"),
    "experience_dates": ("Dates", "Період"),
    "experience_description": ("Description", "Опис"),
    "experience_achievements": ("Achievements", "Досягнення"),
    "experience_technologies": ("Technologies", "Технології"),
    # education
    "education_section": ("Education", "Освіта"),
    "education_degree": ("Degree", "Ступінь"),
    "education_field": ("Field of Study", "Спеціальність"),
    "education_institution": ("Institution", "Навчальний заклад"),
    "education_location": ("Location", "Місто"),
    "education_start_date": ("Start Date", "Дата початку"),
    "education_end_date": ("End Date", "Дата завершення"),
    "education_dates": ("Dates", "Період"),
    "education_gpa": ("GPA", "Середній бал"),
    "education_honors": ("Honors", "Відзнаки"),
    "education_description": ("Description", "Опис"),
    "education_thesis": ("Thesis", "Дипломна робота"),
    # skills
    "skills_section": ("Skills", "Навички"),
    "skill": ("Skill", "Навичка"),
    "skill_category": ("Skill Category", "Категорія навичок"),
    "skill_list": ("Skills List", "Список навичок"),
    "skill_level": ("Skill Level", "Рівень"),
    "technical_skills": ("Technical Skills", "Технічні навички"),
    "soft_skills": ("Soft Skills", "Soft Skills"),
    "tools": ("Tools", "Інструменти"),
    "frameworks": ("Frameworks", "Фреймворки"),
    "programming_languages": ("Programming Languages", "Мови програмування"),
    # languages
    "languages_section": ("Languages", "Мови"),
    "language": ("Language", "Мова"),
    "language_level": ("Level", "Рівень"),
    "language_entry": ("Language", "Мова"),
    # certifications
    "certifications_section": ("Certifications", "Сертифікати"),
    "certification_name": ("Certificate Name", "Назва сертифікату"),
    "certification_issuer": ("Issuer", "Видавець"),
    "certification_date": ("Date", "Дата"),
    "certification_expiry": ("Expiry Date", "Дійсний до"),
    "certification_id": ("Credential ID", "ID сертифікату"),
    "certification_url": ("URL", "Посилання"),
    # projects
    "projects_section": ("Projects", "Проекти"),
    "project_name": ("Project Name", "Назва проекту"),
    "project_role": ("Role", "Роль"),
    "project_description": ("Description", "Опис"),
    "project_technologies": ("Technologies", "Технології"),
    "project_url": ("URL", "Посилання"),
    "project_github": ("GitHub", "GitHub"),
    "project_dates": ("Dates", "Період"),
    "project_achievements": ("Achievements", "Досягнення"),
    # awards
    "awards_section": ("Awards", "Нагороди"),
    "award_name": ("Award Name", "Назва нагороди"),
    "award_issuer": ("Issuer", "Видавець"),
    "award_date": ("Date", "Дата"),
    "award_description": ("Description", "Опис"),
    # publications
    "publications_section": ("Publications", "Публікації"),
    "publication_title": ("Title", "Назва"),
    "publication_authors": ("Authors", "Автори"),
    "publication_journal": ("Journal", "Видання"),
    "publication_date": ("Date", "Дата"),
    "publication_url": ("URL", "Посилання"),
    "publication_description": ("Description", "Опис"),
    # volunteer
    "volunteer_section": ("Volunteer", "Волонтерство"),
    "volunteer_role": ("Role", "Роль"),
    "volunteer_organization": ("Organization", "Організація"),
    "volunteer_location": ("Location", "Місто"),
    "volunteer_dates": ("Dates", "Період"),
    "volunteer_description": ("Description", "Опис"),
    # interests
    "interests_section": ("Interests", "Інтереси"),
    "interest": ("Interest", "Інтерес"),
    "interests_list": ("Interests", "Інтереси"),
    # references
    "references_section": ("References", "Рекомендації"),
    "reference_name": ("Name", "Ім'я"),
    "reference_title": ("Title", "Посада"),
    "reference_company": ("Company", "Компанія"),
    "reference_email": ("Email", "Email"),
    "reference_phone": ("Phone", "Телефон"),
    "reference_relationship": ("Relationship", "Зв'язок"),
    "references_available": ("Available on Request", "За запитом"),
    # courses
    "courses_section": ("Courses", "Курси"),
    "course_name": ("Course Name", "Назва курсу"),
    "course_provider": ("Provider", "Провайдер"),
    "course_date": ("Date", "Дата"),
    "course_certificate": ("Certificate", "Сертифікат"),
    # memberships
    "memberships_section": ("Memberships", "Членство"),
    "membership_organization": ("Organization", "Організація"),
    "membership_role": ("Role", "Роль"),
    "membership_dates": ("Dates", "Період"),
    # patents
    "patents_section": ("Patents", "Патенти"),
    "patent_title": ("Patent Title", "Назва патенту"),
    "patent_number": ("Patent Number", "Номер патенту"),
    "patent_date": ("Date", "Дата"),
    "patent_description": ("Description", "Опис"),
    # military
    "military_section": ("Military Service", "Військова служба"),
    "military_branch": ("Branch", "Рід військ"),
    "military_rank": ("Rank", "Звання"),
    "military_dates": ("Dates", "Період"),
    "military_description": ("Description", "Опис"),
    # layout
    "section_header": ("Section Header", "Заголовок секції"),
    "divider": ("Divider", "Розділювач"),
    "spacer": ("Spacer", "Відступ"),
    "icon": ("Icon", "Іконка"),
    "background": ("Background", "Фон"),
    # custom
    "custom_text": ("Custom Text", "Текст"),
    "custom_shape": ("Custom Shape", "Фігура"),
}

SEMANTIC_TYPE_LABELS: Dict[str, Dict[str, str]] = {
    tag: {"en": en, "uk": uk} for tag, (en, uk) in _TAG_LABELS.items()
}

CATEGORY_LABELS: Dict[str, Dict[str, str]] = {
    "personal": {"en": "Personal Info", "uk": "Особиста інформація"},
    "contact": {"en": "Contact", "uk": "Контакти"},
    "summary": {"en": "Summary", "uk": "Про мене"},
    "experience": {"en": "Experience", "uk": "Досвід роботи"},
    "education": {"en": "Education", "uk": "Освіта"},
    "skills": {"en": "Skills", "uk": "Навички"},
    "languages": {"en": "Languages", "uk": "Мови"},
    "certifications": {"en": "Certifications", "uk": "Сертифікати"},
    "projects": {"en": "Projects", "uk": "Проекти"},
    "awards": {"en": "Awards", "uk": "Нагороди"},
    "publications": {"en": "Publications", "uk": "Публікації"},
    "volunteer": {"en": "Volunteer", "uk": "Волонтерство"},
    "interests": {"en": "Interests", "uk": "Інтереси"},
    "references": {"en": "References", "uk": "Рекомендації"},
    "courses": {"en": "Courses", "uk": "Курси"},
    "memberships": {"en": "Memberships", "uk": "Членство"},
    "patents": {"en": "Patents", "uk": "Патенти"},
    "military": {"en": "Military Service", "uk": "Військова служба"},
    "layout": {"en": "Layout", "uk": "Макет"},
    "custom": {"en": "Custom", "uk": "Інше"},
}

# Header strings drawn on the canvas by the renderers
SECTION_HEADER_LABELS: Dict[str, Dict[str, str]] = {
    "en": {
        "contact": "CONTACT",
        "details": "DETAILS",
        "summary": "PROFESSIONAL SUMMARY",
        "profile": "PROFILE",
        "experience": "WORK EXPERIENCE",
        "education": "EDUCATION",
        "skills": "SKILLS",
        "languages": "LANGUAGES",
        "certifications": "CERTIFICATIONS",
        "projects": "PROJECTS",
        "interests": "INTERESTS",
    },
    "uk": {
        "contact": "КОНТАКТИ",
        "details": "ОСОБИСТІ ДАНІ",
        "summary": "ПРО МЕНЕ",
        "profile": "ПРОФІЛЬ",
        "experience": "ДОСВІД РОБОТИ",
        "education": "ОСВІТА",
        "skills": "НАВИЧКИ",
        "languages": "МОВИ",
        "certifications": "СЕРТИФІКАТИ",
        "projects": "ПРОЕКТИ",
        "interests": "ІНТЕРЕСИ",
    },
    "de": {
        "contact": "KONTAKT",
        "details": "PERSÖNLICHE DATEN",
        "summary": "ZUSAMMENFASSUNG",
        "profile": "PROFIL",
        "experience": "BERUFSERFAHRUNG",
        "education": "AUSBILDUNG",
        "skills": "KENNTNISSE",
        "languages": "SPRACHEN",
        "certifications": "ZERTIFIKATE",
        "projects": "PROJEKTE",
        "interests": "INTERESSEN",
    },
}

# "Present" for open-ended date ranges
PRESENT_LABELS: Dict[str, str] = {"en": "Present", "uk": "Теперішній час", "de": "Heute"}


def get_semantic_type_label(semantic_type: str, locale: str = "en") -> str:
    """Display label for a tag, falling back to the tag itself."""
    return SEMANTIC_TYPE_LABELS.get(semantic_type, {}).get(locale) or semantic_type


def get_category_label(category: str, locale: str = "en") -> str:
    """Display label for a category, falling back to the category name."""
    return CATEGORY_LABELS.get(category, {}).get(locale) or category


def get_section_header(section: str, locale: str = "en") -> str:
    """Rendered header text for a section; unknown locales use English."""
    labels = SECTION_HEADER_LABELS.get(locale, SECTION_HEADER_LABELS["en"])
    return labels.get(section) or SECTION_HEADER_LABELS["en"].get(section, section.upper())


def get_present_label(locale: str = "en") -> str:
    """Word used for the open end of a current position."""
    return PRESENT_LABELS.get(locale, PRESENT_LABELS["en"])
