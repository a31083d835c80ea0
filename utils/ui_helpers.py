"""
UI Helper Functions
===================

Presentation helpers shared by the templates: navigation, per-blueprint
assets, page classes and the skills chart on the about page.
"""

from flask import request
from typing import Dict, List, Optional, Union


NAV_ITEMS = [
    {'name': 'Home', 'path': '/'},
    {'name': 'About Me', 'path': '/about'},
    {'name': 'Projects', 'path': '/projects'},
    {'name': 'Blog', 'path': '/blog'},
    {'name': 'Contact Me', 'path': '/contact'},
]

# (label, proficiency %, rgb)
SKILLS = [
    ('JavaScript', 90, (0, 123, 255)),
    ('Python', 85, (40, 167, 69)),
    ('SQL', 80, (255, 193, 7)),
    ('React', 90, (220, 53, 69)),
    ('Node.js', 75, (108, 117, 125)),
    ('Tailwind CSS', 95, (23, 162, 184)),
    ('Data Viz', 88, (111, 66, 193)),
    ('Cloud (AWS)', 70, (253, 126, 20)),
]


def is_nav_active(item_path: str, current_path: Optional[str]) -> bool:
    """
    Whether a navigation item is the active one

    The root item only matches exactly; every other item also matches its
    sub-paths, so ``/blog/some-post`` highlights ``Blog``.
    """
    if not current_path:
        return False
    if current_path == item_path:
        return True
    return item_path != '/' and current_path.startswith(item_path)


def get_nav_items(current_path: Optional[str]) -> List[Dict]:
    return [
        dict(item, active=is_nav_active(item['path'], current_path))
        for item in NAV_ITEMS
    ]


def get_blueprint_styles(blueprint_name: Optional[str]) -> List[str]:
    """
    CSS files for a blueprint

    Example:
        >>> get_blueprint_styles('pages')
        ['css/pages/public.css']
    """
    if not blueprint_name:
        return []

    blueprint_css_map = {
        'pages': ['css/pages/public.css'],
        'portfolio': ['css/pages/content.css'],
        'blog': ['css/pages/content.css'],
    }

    return blueprint_css_map.get(blueprint_name, [])


def inject_blueprint_assets() -> Dict:
    blueprint_name = request.blueprint if request.blueprint else None

    return {
        'blueprint_styles': get_blueprint_styles(blueprint_name),
        'current_blueprint': blueprint_name,
    }


def get_page_specific_class(blueprint_name: Optional[str], route_name: Optional[str] = None) -> str:
    """
    CSS class for the <body> of a page

    Example:
        >>> get_page_specific_class('blog', 'post_detail')
        'page-blog page-blog-post_detail'
    """
    if not blueprint_name:
        return 'page-default'

    classes = [f'page-{blueprint_name}']

    if route_name:
        classes.append(f'page-{blueprint_name}-{route_name}')

    return ' '.join(classes)


def wrap_label(label: str, max_length: int = 16) -> Union[str, List[str]]:
    """
    Split a chart label into lines of at most ``max_length`` characters

    Labels that already fit come back unchanged as a string. Longer ones are
    broken on spaces; a single word longer than the limit gets its own line.

    Example:
        >>> wrap_label('Information Architecture and Design')
        ['Information', 'Architecture and', 'Design']
    """
    if len(label) <= max_length:
        return label

    lines = []
    current = ''
    for word in label.split(' '):
        if len(current + word) > max_length and current:
            lines.append(current.strip())
            current = word + ' '
        else:
            current += word + ' '
    lines.append(current.strip())
    return lines


def skills_chart_config(skills=None) -> Dict:
    """Chart.js bar chart config for the skills section of the about page"""
    skills = SKILLS if skills is None else skills

    return {
        'type': 'bar',
        'data': {
            'labels': [wrap_label(label) for label, _, _ in skills],
            'datasets': [{
                'label': 'Skill Proficiency',
                'data': [score for _, score, _ in skills],
                'backgroundColor': [f'rgba({r}, {g}, {b}, 0.7)' for _, _, (r, g, b) in skills],
                'borderColor': [f'rgba({r}, {g}, {b}, 1)' for _, _, (r, g, b) in skills],
                'borderWidth': 1,
            }],
        },
        'options': {
            'responsive': True,
            'maintainAspectRatio': False,
            'plugins': {'legend': {'display': False}},
            'scales': {
                'y': {
                    'beginAtZero': True,
                    'max': 100,
                    'title': {'display': True, 'text': 'Proficiency (%)'},
                },
                'x': {
                    'ticks': {'autoSkip': False, 'maxRotation': 45, 'minRotation': 45},
                },
            },
        },
    }
