from flask import Flask, jsonify, request, render_template
from config import Config
import logging
import sys

from database.movies_db import MovieCatalog
from services.formatting import truncate_summary, format_runtime, format_rating
from services.seo import build_site_metadata, build_movie_metadata, build_not_found_metadata

from metrics import (
    metrics_endpoint, track_request,
    CATALOG_SIZE, MOVIE_VIEWS, MOVIE_NOT_FOUND_COUNT
)

logging.basicConfig(
    level=Config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


app = Flask(__name__)
app.config.from_object(Config)

app.add_template_filter(truncate_summary)
app.add_template_filter(format_runtime)
app.add_template_filter(format_rating)

# Loaded once; a malformed dataset stops the process here
catalog = MovieCatalog.from_file(Config.MOVIES_DATA_PATH)
CATALOG_SIZE.set(len(catalog))


def canonical_url_for_request():
    return f"{Config.SITE_URL}{request.path}"


def render_not_found():
    return render_template('not_found.html', seo=build_not_found_metadata()), 404


@app.context_processor
def inject_site():
    return {'site_name': Config.SITE_NAME, 'site_description': Config.SITE_DESCRIPTION}


@app.errorhandler(404)
def page_not_found(error):
    return render_not_found()


@app.route('/')
@track_request
def home():
    return render_template(
        'index.html',
        movies=catalog.get_all_movies(),
        featured=catalog.get_featured_movies(Config.FEATURED_COUNT),
        seo=build_site_metadata(canonical_url_for_request())
    )


@app.route('/movies/<slug>')
@track_request
def movie_detail(slug):
    movie = catalog.get_movie_by_slug(slug)

    if movie is None:
        MOVIE_NOT_FOUND_COUNT.inc()
        logger.info(f"Movie not found: {slug}")
        return render_not_found()

    MOVIE_VIEWS.labels(slug=slug).inc()

    return render_template(
        'movie_detail.html',
        movie=movie,
        related_movies=catalog.get_related_movies(movie, Config.RELATED_LIMIT),
        seo=build_movie_metadata(movie, canonical_url_for_request())
    )


@app.route('/api/movies')
@track_request
def api_movies():
    genre = request.args.get('genre', '').strip()

    if genre:
        movies = catalog.get_movies_by_genre(genre)
    else:
        movies = catalog.get_all_movies()

    return jsonify({
        'movies': [movie.to_dict() for movie in movies],
        'count': len(movies)
    })


@app.route('/api/movies/<slug>')
@track_request
def api_movie_detail(slug):
    movie = catalog.get_movie_by_slug(slug)

    if movie is None:
        MOVIE_NOT_FOUND_COUNT.inc()
        return jsonify({'error': 'Movie not found'}), 404

    seo = build_movie_metadata(movie)

    return jsonify({
        'movie': movie.to_dict(),
        'seo': {
            'title': seo.full_title,
            'description': seo.description,
            'og_image': seo.og_image,
            'og_type': seo.og_type,
            'structured_data': seo.structured_data
        },
        'related': [m.slug for m in catalog.get_related_movies(movie, Config.RELATED_LIMIT)]
    })


@app.route('/info')
def info():
    return jsonify({
        'app_name': Config.SITE_NAME,
        'python_version': sys.version.split()[0],
        'movies': len(catalog)
    })


@app.route('/health')
@track_request
def health():
    return jsonify({
        'status': 'healthy',
        'service': 'cineverse',
        'version': '1.0.0'
    }), 200


@app.route('/metrics')
@track_request
def metrics():
    return metrics_endpoint()


if __name__ == '__main__':
    app.run(
        host=Config.FLASK_HOST,
        port=Config.FLASK_PORT,
        debug=Config.FLASK_DEBUG
    )
