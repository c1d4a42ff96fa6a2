import pytest
from elasticsearch import NotFoundError

from modelindex.config import Settings
from modelindex.elastic_mapping import InvalidArgument
from modelindex.index import (
    create_index,
    delete_document,
    delete_index,
    index_document,
    index_exists,
    refresh_index,
)
from modelindex.models import ConfigurationMissing, ModelNotFound
from tests.sample_models import Person, UserProfile
from tests.test_mapping import PROPERTIES


def test_create_index(elastic, settings):
    """Can we create an index from the model structure"""
    result = create_index(elastic, "person", settings=settings)
    assert result["index"] == "person"
    assert elastic.calls == [("exists", "person"), ("create", "person")]
    created = elastic.created["person"]
    assert created["mappings"] == {"person": {"properties": PROPERTIES}}
    assert created["settings"]["index.mapping.nested_fields.limit"] == 75
    assert created["settings"]["max_result_window"] == 50000
    assert created["settings"]["index.query.bool.max_clause_count"] == 1000000
    assert created["settings"]["analysis"]["analyzer"]["lowercase"] == {
        "type": "custom",
        "tokenizer": "keyword",
        "filter": ["lowercase"],
    }


def test_create_index_name_normalized(elastic, settings):
    create_index(elastic, "user_profile", settings=settings)
    assert set(elastic.created) == {"userprofile"}
    create_index(elastic, "user-profile", settings=settings)
    assert set(elastic.created) == {"userprofile"}
    properties = elastic.created["userprofile"]["mappings"]["userprofile"]["properties"]
    assert properties["companies"]["properties"]["branches"]["properties"]["opened"] == {
        "type": "date",
        "format": "yyyy",
    }


def test_recreate_index(elastic, settings):
    """Creating an index twice deletes the first one"""
    create_index(elastic, "person", settings=settings)
    index_document(elastic, Person())
    create_index(elastic, "person", settings=settings)
    assert elastic.calls[-3:] == [("exists", "person"), ("delete", "person"), ("create", "person")]
    assert list(elastic.created) == ["person"]
    assert elastic.created["person"]["mappings"] == {"person": {"properties": PROPERTIES}}
    # documents are lost on recreation
    assert "person" not in elastic.documents


def test_create_index_settings(elastic, settings):
    create_index(elastic, "person", nested_limit=10, settings=settings)
    assert elastic.created["person"]["settings"]["index.mapping.nested_fields.limit"] == 10

    settings = Settings(
        models_namespace=settings.models_namespace,
        nested_fields_limit=20,
        max_clause_count=None,
        mapping_types=False,
    )
    create_index(elastic, "person", settings=settings)
    created = elastic.created["person"]
    assert created["settings"]["index.mapping.nested_fields.limit"] == 20
    assert "index.query.bool.max_clause_count" not in created["settings"]
    assert created["mappings"] == {"properties": PROPERTIES}


def test_create_index_errors(elastic, settings):
    """Configuration and model errors abort before elastic is called"""
    with pytest.raises(ConfigurationMissing):
        create_index(elastic, "person", settings=Settings(models_namespace=None))
    with pytest.raises(ModelNotFound):
        create_index(elastic, "no_such_model", settings=settings)
    with pytest.raises(ModelNotFound):
        create_index(elastic, "person", settings=Settings(models_namespace="tests.no_such_module"))
    with pytest.raises(InvalidArgument):
        create_index(elastic, "broken", settings=settings)
    assert elastic.calls == []
    assert elastic.created == {}


def test_delete_index(elastic, settings):
    create_index(elastic, "user_profile", settings=settings)
    assert index_exists(elastic, "user_profile")
    delete_index(elastic, "user_profile")
    assert not index_exists(elastic, "user_profile")
    with pytest.raises(NotFoundError):
        delete_index(elastic, "user_profile")
    delete_index(elastic, "user_profile", ignore_missing=True)


def test_refresh_index(elastic):
    refresh_index(elastic, "person")
    assert elastic.calls == [("refresh", "person")]


def test_index_delete_document(elastic):
    """Can we index and delete the document of a model instance"""
    person = Person(id=7, name="Bob")
    result = index_document(elastic, person)
    assert result["_id"] == 7
    assert elastic.documents["person"][7] == person.document()

    profile = UserProfile()
    index_document(elastic, profile)
    assert elastic.documents["userprofile"]["u-1"] == {"email": "user@example.org", "active": True}

    result = delete_document(elastic, person)
    assert result["result"] == "deleted"
    assert 7 not in elastic.documents["person"]


def test_delete_missing_document(elastic):
    """Client errors are passed on unchanged"""
    with pytest.raises(NotFoundError):
        delete_document(elastic, Person(id=99))
