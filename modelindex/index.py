"""
Index and document lifecycle for models

- create_index (re)creates the index for a model from its structure(). If the index already exists it is
  DELETED first, including all its documents: the model structure is the only source of truth for the mapping.
  Delete and create are two separate calls, so a crash in between leaves no index at all.
- index_document and delete_document store or remove a single model instance.

All functions take the elastic client as first argument (see elastic_connection.connect_elastic).
Errors from elastic are not caught here, callers get the client's own exceptions.
"""
import logging
from typing import Any

from elasticsearch import Elasticsearch

from modelindex.config import Settings, get_settings
from modelindex.mapping import index_body
from modelindex.models import IndexableModel, document_type, index_name, resolve_model


def refresh_index(client: Elasticsearch, index: str):
    """
    Refresh the elasticsearch index
    """
    client.indices.refresh(index=index)


def index_exists(client: Elasticsearch, model_name: str) -> bool:
    return bool(client.indices.exists(index=index_name(model_name)))


def create_index(
    client: Elasticsearch,
    model_name: str,
    max_depth: int = 3,
    nested_limit: int | None = None,
    settings: Settings | None = None,
) -> Any:
    """
    Create the index for a model, deleting any existing index with the same name

    :param client: The elastic client
    :param model_name: The model name, e.g. user_profile for the UserProfile model
    :param max_depth: Intended maximum nesting depth. Currently not used, nested columns are mapped to any depth
    :param nested_limit: index.mapping.nested_fields.limit, defaults to the nested_fields_limit setting
    :param settings: Settings to use instead of get_settings()
    :return: the elastic response of the create call
    """
    settings = settings or get_settings()
    model_class = resolve_model(model_name, settings.models_namespace)
    columns = model_class().structure()

    index = index_name(model_name)
    body = index_body(
        index,
        columns,
        nested_limit=settings.nested_fields_limit if nested_limit is None else nested_limit,
        max_result_window=settings.max_result_window,
        max_clause_count=settings.max_clause_count,
        mapping_types=settings.mapping_types,
    )
    logging.debug(f"Index body for {index}: {body}")

    if client.indices.exists(index=index):
        logging.warning(f"Deleting existing index {index} before creating it again")
        client.indices.delete(index=index)

    logging.info(f"Creating index {index} for model {model_class.__name__} with {len(columns)} columns")
    return client.indices.create(index=index, settings=body["settings"], mappings=body["mappings"])


def delete_index(client: Elasticsearch, model_name: str, ignore_missing=False) -> None:
    """
    Delete the index of a model
    :param model_name: The model name
    :param ignore_missing: If True, do not throw exception if index does not exist
    """
    _es = client.options(ignore_status=404) if ignore_missing else client
    _es.indices.delete(index=index_name(model_name))


def index_document(client: Elasticsearch, model: IndexableModel) -> Any:
    """
    Store the document of a model instance in the index for its class, using get_id() as document id
    """
    index = document_type(model)
    doc_id = model.get_id()
    logging.info(f"Indexing document {doc_id} in {index}")
    return client.index(index=index, id=doc_id, document=model.document())


def delete_document(client: Elasticsearch, model: IndexableModel) -> Any:
    """
    Delete the document of a model instance from the index for its class
    """
    index = document_type(model)
    doc_id = model.get_id()
    logging.info(f"Deleting document {doc_id} from {index}")
    return client.delete(index=index, id=doc_id)
