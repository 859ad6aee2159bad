#!/usr/bin/env python3
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import Config
from database.models import DataIntegrityError
from database.movies_db import MovieCatalog


def validate_movies(path=None):
    path = path or Config.MOVIES_DATA_PATH

    try:
        catalog = MovieCatalog.from_file(path)
    except DataIntegrityError as e:
        print(f"Invalid movie dataset: {e}", file=sys.stderr)
        return 1

    slugs = catalog.get_all_movie_slugs()
    print(f"{path}: {len(catalog)} movies OK")
    if len(set(slugs)) != len(slugs):
        print("Warning: duplicate slugs present", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(validate_movies(sys.argv[1] if len(sys.argv) > 1 else None))
