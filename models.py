"""
Models Module - Immutable content records for the portfolio site
Projects and blog posts are authored by the site owner and never change at runtime.
"""

from dataclasses import dataclass, fields
from typing import Tuple


def _require_text(record_name, field_name, value):
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{record_name}.{field_name} must be a non-empty string")


@dataclass(frozen=True)
class ProjectRecord:
    slug: str
    title: str
    category: str
    description: str
    technologies: Tuple[str, ...]
    image_ref: str
    full_content: str

    def __post_init__(self):
        for f in fields(self):
            if f.name == 'technologies':
                continue
            _require_text('ProjectRecord', f.name, getattr(self, f.name))

        if isinstance(self.technologies, str):
            raise ValueError("ProjectRecord.technologies must be a sequence of strings, not a string")
        # Accept any sequence but store a tuple so the record stays hashable
        technologies = tuple(self.technologies or ())
        if not technologies:
            raise ValueError("ProjectRecord.technologies must not be empty")
        for tech in technologies:
            _require_text('ProjectRecord', 'technologies', tech)
        object.__setattr__(self, 'technologies', technologies)

    @classmethod
    def from_dict(cls, data):
        """Build a record from a plain dict (camelCase keys are accepted too)"""
        return cls(
            slug=data.get('slug'),
            title=data.get('title'),
            category=data.get('category'),
            description=data.get('description'),
            technologies=data.get('technologies') or (),
            image_ref=data.get('image_ref', data.get('imageRef')),
            full_content=data.get('full_content', data.get('fullContent')),
        )

    def to_dict(self):
        return {
            'slug': self.slug,
            'title': self.title,
            'category': self.category,
            'description': self.description,
            'technologies': list(self.technologies),
            'image_ref': self.image_ref,
            'full_content': self.full_content,
        }


@dataclass(frozen=True)
class PostRecord:
    slug: str
    title: str
    date: str
    excerpt: str
    full_content: str

    def __post_init__(self):
        for f in fields(self):
            _require_text('PostRecord', f.name, getattr(self, f.name))

    @classmethod
    def from_dict(cls, data):
        return cls(
            slug=data.get('slug'),
            title=data.get('title'),
            date=data.get('date'),
            excerpt=data.get('excerpt'),
            full_content=data.get('full_content', data.get('fullContent')),
        )

    def to_dict(self):
        return {
            'slug': self.slug,
            'title': self.title,
            'date': self.date,
            'excerpt': self.excerpt,
            'full_content': self.full_content,
        }


__all__ = ['ProjectRecord', 'PostRecord']
