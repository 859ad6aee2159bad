import os

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


class Config:
    FLASK_HOST = os.getenv('FLASK_HOST', '0.0.0.0')
    FLASK_PORT = int(os.getenv('FLASK_PORT', '5000'))
    FLASK_DEBUG = os.getenv('FLASK_DEBUG', 'False').lower() == 'true'

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()


    SITE_NAME = os.getenv('SITE_NAME', 'CineVerse')
    SITE_URL = os.getenv('SITE_URL', 'https://cineverse.vercel.app').rstrip('/')
    SITE_TAGLINE = os.getenv(
        'SITE_TAGLINE',
        'Discover top-rated movies with CineVerse. Browse our collection of the best '
        'movies to watch, including classic films, award winners, and must-see cinema. '
        'Find your next favorite movie today!'
    )
    SITE_DESCRIPTION = os.getenv(
        'SITE_DESCRIPTION',
        'Your ultimate destination for movie reviews, ratings, and recommendations'
    )


    DEFAULT_OG_IMAGE = os.getenv('DEFAULT_OG_IMAGE', '/static/images/og-default.svg')
    HOME_OG_IMAGE = os.getenv('HOME_OG_IMAGE', '/static/images/og-home.svg')


    MOVIES_DATA_PATH = os.getenv('MOVIES_DATA_PATH', os.path.join(BASE_DIR, 'data', 'movies.json'))
    FEATURED_COUNT = int(os.getenv('FEATURED_COUNT', '3'))
    RELATED_LIMIT = int(os.getenv('RELATED_LIMIT', '3'))
