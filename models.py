"""
Models - Static portfolio content

Content is supplied once (content/portfolio.json) and never changes while the
app runs, so the models are frozen dataclasses rather than database rows.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

VISIBLE_TECHNOLOGIES = 3


@dataclass(frozen=True)
class Project:
    id: int
    title: str
    description: str
    technologies: Tuple[str, ...] = ()
    full_description: Optional[str] = None
    features: Tuple[str, ...] = ()
    challenges: Optional[str] = None
    demo_url: Optional[str] = None
    github_url: Optional[str] = None
    image: Optional[str] = None

    @property
    def summary(self):
        return self.full_description or self.description

    @property
    def initial(self):
        """Placeholder shown when the project has no image"""
        return self.title[:1]

    @property
    def visible_technologies(self):
        return self.technologies[:VISIBLE_TECHNOLOGIES]

    @property
    def hidden_technology_count(self):
        return max(len(self.technologies) - VISIBLE_TECHNOLOGIES, 0)

    @property
    def title_id(self):
        return f'project-title-{self.id}'

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=int(data['id']),
            title=data['title'],
            description=data.get('description', ''),
            technologies=tuple(data.get('technologies') or ()),
            full_description=data.get('full_description') or None,
            features=tuple(data.get('features') or ()),
            challenges=data.get('challenges') or None,
            demo_url=data.get('demo_url') or None,
            github_url=data.get('github_url') or None,
            image=data.get('image') or None,
        )

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'full_description': self.full_description or '',
            'technologies': list(self.technologies),
            'features': list(self.features),
            'challenges': self.challenges or '',
            'demo_url': self.demo_url or '',
            'github_url': self.github_url or '',
            'image': self.image or '',
        }


@dataclass(frozen=True)
class Skill:
    title: str
    description: str
    icon: str = 'code'

    @classmethod
    def from_dict(cls, data):
        return cls(
            title=data['title'],
            description=data.get('description', ''),
            icon=data.get('icon') or 'code',
        )

    def to_dict(self):
        return {'title': self.title, 'description': self.description, 'icon': self.icon}


@dataclass(frozen=True)
class Profile:
    name: str
    monogram: str = ''
    tagline_texts: Tuple[str, ...] = ()
    intro: str = ''
    about_heading: str = ''
    about_blurb: str = ''
    projects_heading: str = 'Projects'
    projects_blurb: str = ''
    contact_heading: str = ''
    contact_blurb: str = ''
    email: str = ''
    linkedin_url: str = ''
    location_note: str = ''
    skills: Tuple[Skill, ...] = field(default=())
    projects: Tuple[Project, ...] = field(default=())

    @classmethod
    def from_dict(cls, data):
        name = data['name']
        monogram = data.get('monogram') or ''.join(part[:1] for part in name.split()).upper()
        return cls(
            name=name,
            monogram=monogram,
            tagline_texts=tuple(data.get('tagline_texts') or ()),
            intro=data.get('intro', ''),
            about_heading=data.get('about_heading', ''),
            about_blurb=data.get('about_blurb', ''),
            projects_heading=data.get('projects_heading', 'Projects'),
            projects_blurb=data.get('projects_blurb', ''),
            contact_heading=data.get('contact_heading', ''),
            contact_blurb=data.get('contact_blurb', ''),
            email=data.get('email', ''),
            linkedin_url=data.get('linkedin_url', ''),
            location_note=data.get('location_note', ''),
            skills=tuple(Skill.from_dict(s) for s in data.get('skills', [])),
            projects=tuple(Project.from_dict(p) for p in data.get('projects', [])),
        )
