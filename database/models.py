"""Movie record model and dataset validation"""
import re

from attrs import field, frozen
from attrs.validators import deep_iterable, ge, gt, instance_of, le, matches_re


SLUG_PATTERN = re.compile(r'[A-Za-z0-9]+(?:[-_][A-Za-z0-9]+)*')

# dataset key -> attribute name
FIELD_MAP = {
    'id': 'id',
    'slug': 'slug',
    'title': 'title',
    'releaseYear': 'release_year',
    'genre': 'genre',
    'rating': 'rating',
    'runtime': 'runtime',
    'director': 'director',
    'cast': 'cast',
    'description': 'description',
    'plot': 'plot',
    'posterUrl': 'poster_url',
}


class DataIntegrityError(ValueError):
    """Raised when the movie dataset is malformed"""


def _string_tuple(value):
    if not isinstance(value, (list, tuple)):
        raise TypeError(f"expected a list of strings, got {type(value).__name__}")
    return tuple(value)


def _not_bool(instance, attribute, value):
    if isinstance(value, bool):
        raise TypeError(f"'{attribute.name}' must not be a boolean")


_strings = deep_iterable(member_validator=instance_of(str), iterable_validator=instance_of(tuple))


@frozen
class MovieRecord:
    id: object = field(validator=[instance_of((int, str)), _not_bool])
    slug: str = field(validator=[instance_of(str), matches_re(SLUG_PATTERN)])
    title: str = field(validator=instance_of(str))
    release_year: int = field(validator=[instance_of(int), _not_bool])
    genre: tuple = field(converter=_string_tuple, validator=_strings)
    rating: float = field(validator=[instance_of((int, float)), _not_bool, ge(0), le(10)])
    runtime: int = field(validator=[instance_of(int), _not_bool, gt(0)])
    director: str = field(validator=instance_of(str))
    cast: tuple = field(converter=_string_tuple, validator=_strings)
    description: str = field(validator=instance_of(str))
    plot: str = field(validator=instance_of(str))
    poster_url: str = field(validator=instance_of(str))

    @classmethod
    def from_dict(cls, data):
        """
        Build a record from one dataset entry

        Raises:
            DataIntegrityError: missing, unknown or mistyped fields
        """
        if not isinstance(data, dict):
            raise DataIntegrityError(f"expected an object, got {type(data).__name__}")

        missing = [key for key in FIELD_MAP if key not in data]
        if missing:
            raise DataIntegrityError(f"missing fields: {', '.join(missing)}")

        unknown = sorted(key for key in data if key not in FIELD_MAP)
        if unknown:
            raise DataIntegrityError(f"unknown fields: {', '.join(unknown)}")

        try:
            return cls(**{attr: data[key] for key, attr in FIELD_MAP.items()})
        except (TypeError, ValueError) as e:
            raise DataIntegrityError(str(e)) from e

    def to_dict(self):
        """Dataset-shaped (camelCase) copy of the record"""
        result = {}
        for key, attr in FIELD_MAP.items():
            value = getattr(self, attr)
            result[key] = list(value) if isinstance(value, tuple) else value
        return result
