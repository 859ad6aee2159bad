import json
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from database.models import MovieRecord


def _movie_data(**overrides):
    data = {
        'id': 1,
        'slug': 'inception',
        'title': 'Inception',
        'releaseYear': 2010,
        'genre': ['Sci-Fi', 'Action'],
        'rating': 8.8,
        'runtime': 148,
        'director': 'Christopher Nolan',
        'cast': ['Leonardo DiCaprio'],
        'description': 'A thief plants an idea.',
        'plot': 'Dom Cobb enters dreams to steal secrets.',
        'posterUrl': '/static/images/posters/inception.jpg',
    }
    data.update(overrides)
    return data


@pytest.fixture
def movie_data():
    return _movie_data


@pytest.fixture
def make_movie():
    def factory(**overrides):
        return MovieRecord.from_dict(_movie_data(**overrides))
    return factory


@pytest.fixture
def write_dataset(tmp_path):
    def writer(content):
        path = tmp_path / 'movies.json'
        if isinstance(content, str):
            path.write_text(content, encoding='utf-8')
        else:
            path.write_text(json.dumps(content), encoding='utf-8')
        return str(path)
    return writer
