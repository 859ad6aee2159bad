from config import Config
from services.seo import (
    SeoMetadata, build_movie_metadata, build_not_found_metadata, build_site_metadata
)


def test_movie_metadata_title(make_movie):
    seo = build_movie_metadata(make_movie())

    assert seo.title == 'Inception (2010) - Review & Rating'
    assert seo.full_title == f'Inception (2010) - Review & Rating | {Config.SITE_NAME}'
    assert seo.og_type == 'video.movie'
    assert seo.og_image == '/static/images/posters/inception.jpg'
    assert seo.canonical_url is None


def test_movie_metadata_description(make_movie):
    movie = make_movie(description='A thief\n   plants an idea.', rating=9.0)

    seo = build_movie_metadata(movie)

    assert seo.description == (
        'Inception (2010) - A thief plants an idea. Directed by Christopher Nolan. '
        "Rating: 9/10. Watch now and discover why it's a must-see film."
    )
    assert '\n' not in seo.description


def test_movie_structured_data(make_movie):
    movie = make_movie(cast=['Leonardo DiCaprio', 'Tom Hardy'])

    data = build_movie_metadata(movie).structured_data

    assert data['@context'] == 'https://schema.org'
    assert data['@type'] == 'Movie'
    assert data['name'] == 'Inception'
    assert data['datePublished'] == '2010'
    assert data['genre'] == ['Sci-Fi', 'Action']
    assert data['duration'] == 'PT148M'
    assert data['director'] == {'@type': 'Person', 'name': 'Christopher Nolan'}
    assert data['actor'] == [
        {'@type': 'Person', 'name': 'Leonardo DiCaprio'},
        {'@type': 'Person', 'name': 'Tom Hardy'},
    ]


def test_movie_structured_data_ratings(make_movie):
    data = build_movie_metadata(make_movie(runtime=142)).structured_data

    assert data['duration'] == 'PT142M'
    assert data['aggregateRating'] == {
        '@type': 'AggregateRating',
        'ratingValue': '8.8',
        'bestRating': '10',
        'worstRating': '1',
        'ratingCount': '1000',
    }
    assert data['review']['reviewRating'] == {
        '@type': 'Rating', 'ratingValue': '8.8', 'bestRating': '10'
    }
    assert data['review']['author'] == {'@type': 'Organization', 'name': Config.SITE_NAME}


def test_movie_metadata_deterministic(make_movie):
    movie = make_movie()

    first = build_movie_metadata(movie)
    second = build_movie_metadata(movie)

    assert first == second
    assert first.structured_data is not second.structured_data


def test_movie_metadata_canonical_url(make_movie):
    movie = make_movie()
    url = f'{Config.SITE_URL}/movies/inception'

    seo = build_movie_metadata(movie, url)

    assert seo.canonical_url == url
    assert seo.structured_data == build_movie_metadata(movie).structured_data


def test_site_metadata():
    seo = build_site_metadata()

    assert seo.title == Config.SITE_NAME
    assert seo.full_title == Config.SITE_NAME
    assert seo.description == Config.SITE_TAGLINE
    assert seo.og_type == 'website'
    assert seo.og_image == Config.HOME_OG_IMAGE


def test_site_structured_data():
    data = build_site_metadata().structured_data

    assert data['@type'] == 'WebSite'
    assert data['name'] == Config.SITE_NAME
    assert data['url'] == Config.SITE_URL
    action = data['potentialAction']
    assert action['@type'] == 'SearchAction'
    assert action['target'] == f'{Config.SITE_URL}/search?q={{search_term_string}}'
    assert action['query-input'] == 'required name=search_term_string'


def test_not_found_metadata():
    seo = build_not_found_metadata()

    assert seo.full_title == f'Movie Not Found | {Config.SITE_NAME}'
    assert seo.structured_data is None


def test_full_title_empty():
    assert SeoMetadata(title='', description='').full_title == Config.SITE_NAME
