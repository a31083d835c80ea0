"""Record builders with sensible defaults for tests."""

from models import PostRecord, ProjectRecord


def make_project(slug='alpha', **overrides):
    fields = {
        'slug': slug,
        'title': f'Project {slug}',
        'category': 'Testing',
        'description': f'Description of {slug}',
        'technologies': ['Python', 'Flask'],
        'image_ref': f'https://placehold.co/600x400?text={slug}',
        'full_content': f'<p>Body of <strong>{slug}</strong></p>',
    }
    fields.update(overrides)
    return ProjectRecord(**fields)


def make_post(slug='first-post', **overrides):
    fields = {
        'slug': slug,
        'title': f'Post {slug}',
        'date': 'January 1, 2025',
        'excerpt': f'Excerpt of {slug}',
        'full_content': f'<p>Body of <em>{slug}</em></p>',
    }
    fields.update(overrides)
    return PostRecord(**fields)
