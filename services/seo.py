"""
Page-level SEO metadata

Builds title, description, OpenGraph fields and schema.org JSON-LD for
the home page and the movie pages. Every builder here is a pure function
of its arguments and the site configuration.
"""
from attrs import frozen

from config import Config
from services.formatting import format_rating

SCHEMA_CONTEXT = 'https://schema.org'

# Placeholder until real review counts exist
RATING_COUNT = '1000'


@frozen
class SeoMetadata:
    title: str
    description: str
    og_image: str = Config.DEFAULT_OG_IMAGE
    og_type: str = 'website'
    canonical_url: str | None = None
    structured_data: dict | None = None
    site_name: str = Config.SITE_NAME

    @property
    def full_title(self):
        if not self.title or self.title == self.site_name:
            return self.site_name
        return f"{self.title} | {self.site_name}"


def _single_paragraph(text):
    return ' '.join(text.split())


def generate_website_json_ld():
    return {
        '@context': SCHEMA_CONTEXT,
        '@type': 'WebSite',
        'name': Config.SITE_NAME,
        'description': Config.SITE_DESCRIPTION,
        'url': Config.SITE_URL,
        'potentialAction': {
            '@type': 'SearchAction',
            'target': f"{Config.SITE_URL}/search?q={{search_term_string}}",
            'query-input': 'required name=search_term_string'
        }
    }


def generate_movie_json_ld(movie):
    """
    schema.org Movie record for rich search results

    Args:
        movie: MovieRecord

    Returns:
        dict: JSON-LD mapping, ready for json serialisation
    """
    rating = format_rating(movie.rating)

    return {
        '@context': SCHEMA_CONTEXT,
        '@type': 'Movie',
        'name': movie.title,
        'description': movie.description,
        'image': movie.poster_url,
        'datePublished': str(movie.release_year),
        'genre': list(movie.genre),
        'duration': f"PT{movie.runtime}M",
        'director': {
            '@type': 'Person',
            'name': movie.director
        },
        'actor': [
            {'@type': 'Person', 'name': actor}
            for actor in movie.cast
        ],
        'aggregateRating': {
            '@type': 'AggregateRating',
            'ratingValue': rating,
            'bestRating': '10',
            'worstRating': '1',
            'ratingCount': RATING_COUNT
        },
        'review': {
            '@type': 'Review',
            'reviewRating': {
                '@type': 'Rating',
                'ratingValue': rating,
                'bestRating': '10'
            },
            'author': {
                '@type': 'Organization',
                'name': Config.SITE_NAME
            }
        }
    }


def build_site_metadata(canonical_url=None):
    return SeoMetadata(
        title=Config.SITE_NAME,
        description=Config.SITE_TAGLINE,
        og_image=Config.HOME_OG_IMAGE,
        og_type='website',
        canonical_url=canonical_url,
        structured_data=generate_website_json_ld()
    )


def build_movie_metadata(movie, canonical_url=None):
    title = f"{movie.title} ({movie.release_year}) - Review & Rating"
    description = _single_paragraph(
        f"{movie.title} ({movie.release_year}) - {movie.description} "
        f"Directed by {movie.director}. Rating: {format_rating(movie.rating)}/10. "
        "Watch now and discover why it's a must-see film."
    )

    return SeoMetadata(
        title=title,
        description=description,
        og_image=movie.poster_url,
        og_type='video.movie',
        canonical_url=canonical_url,
        structured_data=generate_movie_json_ld(movie)
    )


def build_not_found_metadata():
    return SeoMetadata(
        title='Movie Not Found',
        description="Sorry, we couldn't find the movie you're looking for."
    )
