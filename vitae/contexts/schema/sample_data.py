"""
Sample resume content per locale.

Used as template preview content and as the fallback when a template switch
finds no tagged content to carry over.
"""

from typing import Any, Dict

from vitae.contexts.schema.record import ResumeRecord

SAMPLE_DATA: Dict[str, Dict[str, Any]] = {
    "en": {
        "personalInfo": {
            "fullName": "John Smith",
            "title": "Senior Software Engineer",
            "email": "john.smith@email.com",
            "phone": "+1 (555) 123-4567",
            "location": "San Francisco, CA",
            "linkedin": "linkedin.com/in/johnsmith",
            "website": "johnsmith.dev",
        },
        "summary": (
            "Results-driven software engineer with 8+ years of experience developing scalable "
            "web applications. Proven track record of leading cross-functional teams and "
            "delivering projects that increased revenue by 40%."
        ),
        "experience": [
            {
                "title": "Senior Software Engineer",
                "company": "Tech Company Inc.",
                "location": "San Francisco, CA",
                "startDate": "Jan 2020",
                "endDate": None,
                "current": True,
                "description": [
                    "Led development of microservices architecture serving 2M+ daily users",
                    "Reduced API response time by 60% through optimization",
                    "Mentored team of 5 junior developers",
                ],
            },
            {
                "title": "Software Engineer",
                "company": "Startup Co.",
                "location": "New York, NY",
                "startDate": "Jun 2017",
                "endDate": "Dec 2019",
                "current": False,
                "description": [
                    "Built real-time data processing pipeline handling 100K events/second",
                    "Implemented CI/CD pipelines reducing deployment time by 50%",
                ],
            },
        ],
        "education": [
            {
                "degree": "Bachelor of Science in Computer Science",
                "institution": "University of Technology",
                "location": "Boston, MA",
                "startDate": "2013",
                "endDate": "2017",
            },
        ],
        "skills": [
            "JavaScript",
            "TypeScript",
            "React",
            "Node.js",
            "Python",
            "AWS",
            "Docker",
            "PostgreSQL",
            "Git",
            "Agile",
        ],
        "languages": [
            {"language": "English", "level": "Native"},
            {"language": "Spanish", "level": "Intermediate"},
        ],
    },
    "uk": {
        "personalInfo": {
            "fullName": "Іван Петренко",
            "title": "Senior Frontend Developer",
            "email": "ivan.petrenko@email.com",
            "phone": "+380 67 123 4567",
            "location": "Київ, Україна",
            "linkedin": "linkedin.com/in/ivanpetrenko",
            "github": "github.com/ivanpetrenko",
        },
        "summary": (
            "Досвідчений Frontend розробник з 6+ роками досвіду у створенні сучасних "
            "веб-додатків. Спеціалізуюся на React та TypeScript. Маю досвід роботи в "
            "міжнародних командах та успішного delivery проектів для Fortune 500 компаній."
        ),
        "experience": [
            {
                "title": "Senior Frontend Developer",
                "company": "IT Solutions",
                "location": "Київ",
                "startDate": "Січень 2021",
                "endDate": None,
                "current": True,
                "description": [
                    "Розробка та підтримка enterprise веб-додатків на React",
                    "Впровадження TypeScript, що зменшило кількість багів на 40%",
                    "Менторство junior та middle розробників",
                ],
            },
            {
                "title": "Frontend Developer",
                "company": "Tech Startup",
                "location": "Львів",
                "startDate": "Березень 2018",
                "endDate": "Грудень 2020",
                "current": False,
                "description": [
                    "Створення SPA додатків з нуля",
                    "Оптимізація продуктивності та SEO",
                ],
            },
        ],
        "education": [
            {
                "degree": "Магістр комп'ютерних наук",
                "institution": "Київський політехнічний інститут",
                "location": "Київ",
                "startDate": "2014",
                "endDate": "2020",
            },
        ],
        "skills": [
            "JavaScript",
            "TypeScript",
            "React",
            "Next.js",
            "Node.js",
            "PostgreSQL",
            "Git",
            "Docker",
            "AWS",
        ],
        "languages": [
            {"language": "Українська", "level": "Рідна"},
            {"language": "Англійська", "level": "Upper-Intermediate"},
            {"language": "Польська", "level": "Базовий"},
        ],
    },
    "de": {
        "personalInfo": {
            "fullName": "Max Müller",
            "title": "Software Entwickler",
            "email": "max.mueller@email.de",
            "phone": "+49 123 456 7890",
            "location": "Berlin, Deutschland",
            "linkedin": "linkedin.com/in/maxmueller",
            "photo": True,
        },
        "summary": (
            "Engagierter Software-Entwickler mit Expertise in Full-Stack-Entwicklung. "
            "Leidenschaftlich daran interessiert, effiziente und benutzerfreundliche "
            "Anwendungen zu erstellen."
        ),
        "experience": [
            {
                "title": "Software Entwickler",
                "company": "Tech GmbH",
                "location": "Berlin",
                "startDate": "2019",
                "endDate": None,
                "current": True,
                "description": [
                    "Entwicklung und Wartung von Enterprise-Webanwendungen",
                    "Zusammenarbeit mit internationalen Teams",
                    "Implementierung von CI/CD-Pipelines",
                ],
            },
        ],
        "education": [
            {
                "degree": "Master of Science in Informatik",
                "institution": "Technische Universität Berlin",
                "location": "Berlin",
                "startDate": "2017",
                "endDate": "2019",
            },
        ],
        "skills": [
            "React",
            "Vue.js",
            "Node.js",
            "Python",
            "Java",
            "PostgreSQL",
            "MongoDB",
            "AWS",
            "Docker",
            "Kubernetes",
        ],
        "languages": [
            {"language": "Deutsch", "level": "Muttersprache"},
            {"language": "Englisch", "level": "Fließend"},
            {"language": "Französisch", "level": "Grundkenntnisse"},
        ],
    },
}


def get_sample_record(locale: str = "en") -> ResumeRecord:
    """Sample record for a locale; unknown locales get the English sample."""
    return ResumeRecord.from_dict(SAMPLE_DATA.get(locale, SAMPLE_DATA["en"]))
