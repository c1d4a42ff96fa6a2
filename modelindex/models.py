"""
The models that can be indexed, and how model names are resolved to model classes.

A model is any class that provides:
- structure(): a {field: type} mapping describing its columns (see elastic_mapping.to_type_spec)
- document(): the {field: value} body to store in elastic
- get_id(): the document id
The lowercased class name is used as the index and document type name.
"""
import importlib
import logging
import re
from typing import Any, Mapping, Protocol


class ConfigurationMissing(Exception):
    pass


class ModelNotFound(ValueError):
    pass


class IndexableModel(Protocol):
    def structure(self) -> Mapping[str, Any]: ...

    def document(self) -> Mapping[str, Any]: ...

    def get_id(self) -> Any: ...


def model_class_name(model_name: str) -> str:
    """
    Convert a model name as used in urls and commands (user_profile, user-profile) to a class name (UserProfile)
    """
    words = re.sub(r"[_-]", " ", model_name).split()
    return "".join(word[:1].upper() + word[1:] for word in words)


def index_name(model_name: str) -> str:
    """The elastic index name for a model name: lowercase, without _ and -"""
    return re.sub(r"[_-]", "", model_name).lower()


def document_type(model: IndexableModel) -> str:
    return type(model).__name__.lower()


def resolve_model(model_name: str, namespace: str | None) -> type:
    """
    Find the model class for model_name in the namespace module.
    Raises ConfigurationMissing if no namespace is given and ModelNotFound if there is no such class.
    """
    if not namespace:
        raise ConfigurationMissing(
            "Please add the namespace definition for your models (MODELINDEX_MODELS_NAMESPACE)"
        )
    class_name = model_class_name(model_name)
    try:
        module = importlib.import_module(namespace)
    except ModuleNotFoundError as e:
        raise ModelNotFound(f"Model namespace {namespace!r} cannot be imported: {e}")
    model_class = getattr(module, class_name, None)
    if not isinstance(model_class, type):
        raise ModelNotFound(f"The specified model {namespace}.{class_name} does not exist")
    logging.debug(f"Resolved model {model_name!r} to {namespace}.{class_name}")
    return model_class
