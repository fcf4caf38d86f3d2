"""
Схемы контента портфолио (агрегат, который хранится целиком как версия).

В JSON поля в camelCase (profileImage, graphicDesigns, demoUrl): так их ждёт фронтенд,
на входе принимаются оба варианта.
"""
import math

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ContentModel(BaseModel):
    """База: camelCase в JSON, snake_case в Python и в БД."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Skill(ContentModel):
    """Навык. level всегда в диапазоне 0..100 (зажимается на сервере)."""

    name: str = Field(min_length=1)
    level: int = 0

    @field_validator("level", mode="before")
    @classmethod
    def clamp_level(cls, value):
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            if not math.isfinite(value):
                raise ValueError("level must be a finite number")
            return max(0, min(100, round(value)))
        return value


class ShowcaseProject(ContentModel):
    """Проект на главной странице (не путать со строкой коллекции projects)."""

    title: str = Field(min_length=1)
    description: str = ""
    image: str = ""
    technologies: list[str] = []
    demo_url: str = ""
    github_url: str = ""


class Design(ContentModel):
    """Работа из галереи графического дизайна."""

    title: str = Field(min_length=1)
    description: str = ""
    image: str = ""
    category: str = ""
    tools: list[str] = []
    client: str | None = None
    date: str = ""


class SocialLink(ContentModel):
    name: str = Field(min_length=1)
    url: str = ""


class LegacyMessage(ContentModel):
    """Сообщение, встроенное в агрегат. Новые сообщения живут в коллекции messages."""

    name: str = ""
    email: str = ""
    message: str = ""
    date: str = ""


class PortfolioContent(ContentModel):
    """Весь редактируемый контент сайта."""

    name: str = Field(min_length=1)
    tagline: str = ""
    profile_image: str = ""
    about: str = ""
    university: str = ""
    developer_info: str = ""
    resume_url: str = ""
    email: str = ""
    github: str = ""
    skills: list[Skill] = []
    projects: list[ShowcaseProject] = []
    graphic_designs: list[Design] = []
    social_links: list[SocialLink] = []
    messages: list[LegacyMessage] = []


class PortfolioContentUpdate(ContentModel):
    """
    Частичное обновление (PUT /content). Переданное поле целиком заменяет прежнее,
    непереданное остаётся как было. Поэтому мёржим по model_dump(exclude_unset=True).
    """

    name: str | None = Field(default=None, min_length=1)
    tagline: str | None = None
    profile_image: str | None = None
    about: str | None = None
    university: str | None = None
    developer_info: str | None = None
    resume_url: str | None = None
    email: str | None = None
    github: str | None = None
    skills: list[Skill] | None = None
    projects: list[ShowcaseProject] | None = None
    graphic_designs: list[Design] | None = None
    social_links: list[SocialLink] | None = None
    messages: list[LegacyMessage] | None = None

    def changes(self) -> dict:
        """Только явно переданные поля, null отбрасывается."""
        return {k: v for k, v in self.model_dump(exclude_unset=True).items() if v is not None}


def default_content() -> PortfolioContent:
    """Контент по умолчанию: им засевается пустая коллекция версий."""
    placeholder = "/placeholder.svg?height=400&width=400"
    card = "/placeholder.svg?height=225&width=400"
    return PortfolioContent(
        name="John Doe",
        tagline="Computer Science Student",
        profile_image=placeholder,
        about=(
            "I'm a passionate Computer Science student with a focus on web development "
            "and UI/UX design. I love creating beautiful, functional websites and "
            "applications that solve real-world problems."
        ),
        university="Computer Science",
        developer_info="Full-stack Developer specializing in React and Node.js",
        resume_url="#",
        email="john.doe@example.com",
        github="github.com/johndoe",
        skills=[
            Skill(name="HTML/CSS", level=90),
            Skill(name="JavaScript", level=85),
            Skill(name="React", level=80),
            Skill(name="Node.js", level=75),
            Skill(name="UI/UX Design", level=70),
            Skill(name="Python", level=65),
            Skill(name="Database", level=60),
            Skill(name="Mobile Dev", level=50),
        ],
        projects=[
            ShowcaseProject(
                title="E-Learning Platform",
                description="A platform for online learning with video courses and quizzes.",
                image=card,
                technologies=["React", "Node.js", "MongoDB"],
                demo_url="#",
                github_url="#",
            ),
            ShowcaseProject(
                title="Weather App",
                description="Real-time weather application with forecast and location tracking.",
                image=card,
                technologies=["JavaScript", "API", "CSS"],
                demo_url="#",
                github_url="#",
            ),
            ShowcaseProject(
                title="Portfolio Website",
                description="Personal portfolio website to showcase projects and skills.",
                image=card,
                technologies=["Next.js", "Tailwind CSS"],
                demo_url="#",
                github_url="#",
            ),
        ],
        graphic_designs=[
            Design(
                title="Brand Identity Design",
                description="Complete branding package including logo, color palette, and typography guidelines.",
                image=placeholder,
                category="Branding",
                tools=["Adobe Illustrator", "Adobe Photoshop"],
                client="Local Cafe",
                date="2023-12-10",
            ),
            Design(
                title="Event Poster Series",
                description="Set of promotional posters for a university music festival.",
                image=placeholder,
                category="Print Design",
                tools=["Adobe Photoshop", "Adobe InDesign"],
                client="University",
                date="2023-08-15",
            ),
            Design(
                title="Social Media Campaign",
                description="Visual content for Instagram and Facebook promotional campaign.",
                image=placeholder,
                category="Digital Design",
                tools=["Adobe Photoshop", "Figma"],
                client="Local Business",
                date="2024-01-20",
            ),
            Design(
                title="Mobile App UI Design",
                description="User interface design for a food delivery application.",
                image=placeholder,
                category="UI/UX Design",
                tools=["Figma", "Adobe XD"],
                date="2023-11-05",
            ),
        ],
        social_links=[
            SocialLink(name="GitHub", url="#"),
            SocialLink(name="LinkedIn", url="#"),
            SocialLink(name="Twitter", url="#"),
            SocialLink(name="Instagram", url="#"),
        ],
        messages=[],
    )
