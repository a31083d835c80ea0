"""Tests for the immutable content records."""

import dataclasses

import pytest

from models import PostRecord, ProjectRecord
from tests.factories import make_post, make_project


class TestProjectRecord:
    def test_technologies_stored_as_tuple(self):
        project = make_project(technologies=['React', 'AWS'])
        assert project.technologies == ('React', 'AWS')

    def test_is_frozen(self):
        project = make_project()
        with pytest.raises(dataclasses.FrozenInstanceError):
            project.title = 'Changed'

    @pytest.mark.parametrize('field', ['slug', 'title', 'category', 'description', 'image_ref', 'full_content'])
    def test_rejects_empty_fields(self, field):
        with pytest.raises(ValueError):
            make_project(**{field: '  '})

    def test_rejects_missing_technologies(self):
        with pytest.raises(ValueError):
            make_project(technologies=[])

    def test_rejects_bare_string_technologies(self):
        with pytest.raises(ValueError, match='technologies'):
            make_project(technologies='Python')

    def test_from_dict_accepts_camel_case(self):
        project = ProjectRecord.from_dict({
            'slug': 'crm',
            'title': 'CRM',
            'category': 'Software',
            'description': 'A CRM',
            'technologies': ['Node.js'],
            'imageRef': 'https://example.com/crm.png',
            'fullContent': '<p>CRM</p>',
        })
        assert project.image_ref == 'https://example.com/crm.png'
        assert project.full_content == '<p>CRM</p>'

    def test_from_dict_rejects_partial_record(self):
        with pytest.raises(ValueError):
            ProjectRecord.from_dict({'slug': 'crm', 'title': 'CRM'})

    def test_to_dict(self):
        data = make_project('alpha').to_dict()
        assert data['slug'] == 'alpha'
        assert data['technologies'] == ['Python', 'Flask']


class TestPostRecord:
    def test_rejects_missing_date(self):
        with pytest.raises(ValueError):
            PostRecord.from_dict({
                'slug': 'p',
                'title': 'T',
                'excerpt': 'E',
                'full_content': '<p>B</p>',
            })

    def test_round_trips_through_dict(self):
        post = make_post('hello')
        assert PostRecord.from_dict(post.to_dict()) == post
