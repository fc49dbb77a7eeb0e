"""
Shared helpers for the config sections.

Each section declares which environment variables feed which model field;
these helpers turn an environment snapshot into model input and pydantic
failures into ConfigurationError.
"""

from typing import Any, Dict, Mapping, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from src.utils.exceptions import ConfigurationError

M = TypeVar('M', bound=BaseModel)

# field name -> environment variables, first non-empty one wins
FieldSources = Mapping[str, Tuple[str, ...]]


def collect(env: Mapping[str, str], sources: FieldSources) -> Dict[str, Any]:
    """
    Pick the raw values for a section out of an environment snapshot.

    Blank values count as unset so that the model default applies.
    """
    raw: Dict[str, Any] = {}
    for field, names in sources.items():
        for name in names:
            value = env.get(name)
            if value is not None and value.strip():
                raw[field] = value.strip()
                break
    return raw


def build_section(section: str, model: Type[M], env: Mapping[str, str], sources: FieldSources) -> M:
    """
    Validate a section model from the environment.

    Raises:
        ConfigurationError: If any value fails validation
    """
    try:
        return model(**collect(env, sources))
    except ValidationError as e:
        errors = []
        for err in e.errors():
            field = '.'.join(str(part) for part in err['loc']) or '__root__'
            names = sources.get(field)
            label = f"{field} ({'/'.join(names)})" if names else field
            errors.append(f"{label}: {err['msg']}")
        raise ConfigurationError(section, errors) from e
