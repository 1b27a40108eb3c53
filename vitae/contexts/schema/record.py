"""
Structured resume record.

Plain data with no positions. Persisted form uses camelCase keys
(``personalInfo.fullName``, ``startDate``); missing keys default to empty
strings, empty lists or False so partial records from editors or parsers load.

Example:
    record = ResumeRecord.from_dict({
        "personalInfo": {"fullName": "Jane Doe"},
        "experience": [{"title": "Engineer", "company": "Acme", "current": True}],
    })
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


def _text(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


def _texts(data: Dict[str, Any], key: str) -> List[str]:
    value = data.get(key) or []
    if isinstance(value, str):
        return [value] if value.strip() else []
    return [str(v) for v in value if v is not None]


@dataclass
class PersonalInfo:
    full_name: str = ""
    title: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    website: str = ""
    github: str = ""
    photo: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PersonalInfo":
        data = data or {}
        return cls(
            full_name=_text(data, "fullName"),
            title=_text(data, "title"),
            email=_text(data, "email"),
            phone=_text(data, "phone"),
            location=_text(data, "location"),
            linkedin=_text(data, "linkedin"),
            website=_text(data, "website"),
            github=_text(data, "github"),
            photo=bool(data.get("photo", False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fullName": self.full_name,
            "title": self.title,
            "email": self.email,
            "phone": self.phone,
            "location": self.location,
            "linkedin": self.linkedin,
            "website": self.website,
            "github": self.github,
            "photo": self.photo,
        }

    def contact_items(self) -> List[tuple]:
        """Non-empty contact fields as (tag, text) pairs in display order."""
        fields = (
            ("email", self.email),
            ("phone", self.phone),
            ("location", self.location),
            ("linkedin", self.linkedin),
            ("github", self.github),
            ("website", self.website),
        )
        return [(tag, text) for tag, text in fields if text.strip()]


@dataclass
class ExperienceEntry:
    title: str = ""
    company: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExperienceEntry":
        data = data or {}
        return cls(
            title=_text(data, "title"),
            company=_text(data, "company"),
            location=_text(data, "location"),
            start_date=_text(data, "startDate"),
            end_date=_text(data, "endDate"),
            current=bool(data.get("current", False)),
            description=_texts(data, "description"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "company": self.company,
            "location": self.location,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "current": self.current,
            "description": list(self.description),
        }


@dataclass
class EducationEntry:
    degree: str = ""
    institution: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = ""
    gpa: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EducationEntry":
        data = data or {}
        return cls(
            degree=_text(data, "degree"),
            institution=_text(data, "institution"),
            location=_text(data, "location"),
            start_date=_text(data, "startDate"),
            end_date=_text(data, "endDate"),
            description=_text(data, "description"),
            gpa=_text(data, "gpa"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "degree": self.degree,
            "institution": self.institution,
            "location": self.location,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "description": self.description,
            "gpa": self.gpa,
        }


@dataclass
class LanguageEntry:
    language: str = ""
    level: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LanguageEntry":
        data = data or {}
        return cls(language=_text(data, "language"), level=_text(data, "level"))

    def to_dict(self) -> Dict[str, Any]:
        return {"language": self.language, "level": self.level}


@dataclass
class CertificationEntry:
    name: str = ""
    issuer: str = ""
    date: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CertificationEntry":
        data = data or {}
        return cls(name=_text(data, "name"), issuer=_text(data, "issuer"), date=_text(data, "date"))

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "issuer": self.issuer, "date": self.date}


@dataclass
class ProjectEntry:
    name: str = ""
    description: str = ""
    technologies: List[str] = field(default_factory=list)
    url: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProjectEntry":
        data = data or {}
        return cls(
            name=_text(data, "name"),
            description=_text(data, "description"),
            technologies=_texts(data, "technologies"),
            url=_text(data, "url"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "technologies": list(self.technologies),
            "url": self.url,
        }


@dataclass
class ResumeRecord:
    """
    Complete structured resume.

    Attributes:
        personal_info: Name, title and contact fields
        summary: Free-text professional summary
        experience: Work history entries, most recent first
        education: Education entries
        skills: Flat skill list
        languages: Spoken languages with proficiency level
        certifications: Certifications
        projects: Projects
        interests: Interests / hobbies
    """

    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    summary: str = ""
    experience: List[ExperienceEntry] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)
    skills: List[str] = field(default_factory=list)
    languages: List[LanguageEntry] = field(default_factory=list)
    certifications: List[CertificationEntry] = field(default_factory=list)
    projects: List[ProjectEntry] = field(default_factory=list)
    interests: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResumeRecord":
        data = data or {}
        return cls(
            personal_info=PersonalInfo.from_dict(data.get("personalInfo")),
            summary=_text(data, "summary"),
            experience=[ExperienceEntry.from_dict(e) for e in data.get("experience") or []],
            education=[EducationEntry.from_dict(e) for e in data.get("education") or []],
            skills=_texts(data, "skills"),
            languages=[LanguageEntry.from_dict(e) for e in data.get("languages") or []],
            certifications=[
                CertificationEntry.from_dict(e) for e in data.get("certifications") or []
            ],
            projects=[ProjectEntry.from_dict(e) for e in data.get("projects") or []],
            interests=_texts(data, "interests"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "personalInfo": self.personal_info.to_dict(),
            "summary": self.summary,
            "experience": [e.to_dict() for e in self.experience],
            "education": [e.to_dict() for e in self.education],
            "skills": list(self.skills),
            "languages": [e.to_dict() for e in self.languages],
            "certifications": [e.to_dict() for e in self.certifications],
            "projects": [e.to_dict() for e in self.projects],
            "interests": list(self.interests),
        }

    def is_empty(self) -> bool:
        """True when the record has no name and no section content."""
        return not (
            self.personal_info.full_name.strip()
            or self.summary.strip()
            or self.experience
            or self.education
            or self.skills
            or self.languages
            or self.certifications
            or self.projects
            or self.interests
        )
