from prometheus_client import Counter, Histogram, Gauge, generate_latest, CONTENT_TYPE_LATEST
from flask import Response
import time
import functools


REQUEST_COUNT = Counter(
    'flask_request_count',
    'Total Flask Request Count',
    ['method', 'endpoint', 'http_status']
)

REQUEST_DURATION = Histogram(
    'flask_request_duration_seconds',
    'Flask Request Duration',
    ['method', 'endpoint']
)


CATALOG_SIZE = Gauge(
    'cineverse_catalog_movies',
    'Number of movies loaded from the dataset'
)


MOVIE_VIEWS = Counter(
    'cineverse_movie_views_total',
    'Total movie page views',
    ['slug']
)

MOVIE_NOT_FOUND_COUNT = Counter(
    'cineverse_movie_not_found_total',
    'Movie lookups that matched no slug'
)


def _status_of(response):
    if isinstance(response, tuple):
        return response[1]
    return getattr(response, 'status_code', 200)


def track_request(f):
    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        start_time = time.time()

        try:
            response = f(*args, **kwargs)
        except Exception:
            REQUEST_COUNT.labels(
                method=f.__name__,
                endpoint=f.__name__,
                http_status=500
            ).inc()
            raise

        REQUEST_COUNT.labels(
            method=f.__name__,
            endpoint=f.__name__,
            http_status=_status_of(response)
        ).inc()

        duration = time.time() - start_time
        REQUEST_DURATION.labels(
            method=f.__name__,
            endpoint=f.__name__
        ).observe(duration)

        return response

    return wrapper


def metrics_endpoint():
    return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)
