"""Read-only movie catalogue loaded from the static dataset"""
import json
import logging
from operator import attrgetter

from database.models import DataIntegrityError, MovieRecord

logger = logging.getLogger(__name__)


def load_movies(path):
    """
    Load and validate the movie dataset

    Args:
        path: JSON file holding an array of movie objects

    Returns:
        tuple: MovieRecord items in file order

    Raises:
        DataIntegrityError: unreadable file or malformed record
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to read movie dataset {path}: {e}")
        raise DataIntegrityError(f"cannot read movie dataset {path}: {e}") from e

    if not isinstance(raw, list):
        raise DataIntegrityError(f"movie dataset {path} must be a JSON array")

    movies = []
    for index, entry in enumerate(raw):
        try:
            movies.append(MovieRecord.from_dict(entry))
        except DataIntegrityError as e:
            slug = entry.get('slug') if isinstance(entry, dict) else None
            where = f"record {index}" + (f" ({slug})" if slug else "")
            logger.error(f"Invalid movie {where}: {e}")
            raise DataIntegrityError(f"{where}: {e}") from e

    logger.info(f"Loaded {len(movies)} movies from {path}")
    return tuple(movies)


class MovieCatalog:
    """Query layer over an immutable snapshot of movie records"""

    def __init__(self, movies):
        self._movies = tuple(movies)
        self._by_slug = {}
        seen_ids = set()

        for movie in self._movies:
            if movie.slug in self._by_slug:
                logger.warning(f"Duplicate slug in dataset: {movie.slug}")
            else:
                self._by_slug[movie.slug] = movie

            if movie.id in seen_ids:
                logger.warning(f"Duplicate id in dataset: {movie.id}")
            seen_ids.add(movie.id)

    @classmethod
    def from_file(cls, path):
        return cls(load_movies(path))

    def __len__(self):
        return len(self._movies)

    def __iter__(self):
        return iter(self._movies)

    def get_all_movies(self):
        return list(self._movies)

    def get_all_movie_slugs(self):
        return [movie.slug for movie in self._movies]

    def get_movie_by_slug(self, slug):
        """Exact, case-sensitive slug lookup; None when nothing matches"""
        return self._by_slug.get(slug)

    def get_movies_by_genre(self, genre):
        wanted = genre.lower()
        return [
            movie for movie in self._movies
            if any(g.lower() == wanted for g in movie.genre)
        ]

    def get_featured_movies(self, count=3):
        """
        Top rated movies

        Ties keep dataset order (sorted() is stable, also with reverse=True).
        """
        if count <= 0:
            return []
        ranked = sorted(self._movies, key=attrgetter('rating'), reverse=True)
        return ranked[:count]

    def get_related_movies(self, movie, limit=3):
        """Movies sharing at least one genre label with `movie`, excluding itself"""
        if limit <= 0:
            return []

        genres = set(movie.genre)
        related = []
        for candidate in self._movies:
            if candidate.id == movie.id:
                continue
            if genres.intersection(candidate.genre):
                related.append(candidate)
                if len(related) == limit:
                    break
        return related
