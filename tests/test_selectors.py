import pytest

from graph2rdf.config.settings import ClassInstancesQuery, GraphConfig, PagePropertyQuery
from graph2rdf.selectors import (
    AdditionalPagesSelector,
    ClassInstancesSelector,
    ClassSelector,
    PropertySelector,
)
from graph2rdf.triples import ORIGINAL_NAME, build_property_catalog

BASE_URL = "https://x/#/page/"


def names(records):
    return sorted(record[ORIGINAL_NAME] for record in records)


def test_additional_pages(db, config):
    assert names(AdditionalPagesSelector().records(db, config)) == ["Class", "Property"]


def test_additional_pages_ignore_case(db):
    config = GraphConfig(base_url=BASE_URL, additional_pages={"NOTES", "dog"})

    assert names(AdditionalPagesSelector().records(db, config)) == ["Dog", "Notes"]


def test_class_pages(db, config):
    assert names(ClassSelector().records(db, config)) == ["Animal", "Plant"]


def test_property_pages(db, config):
    assert names(PropertySelector().records(db, config)) == ["color", "habitat"]


def test_class_instances_use_normalized_titles(db, config):
    assert names(ClassInstancesSelector().records(db, config)) == ["Dog", "Quercus"]


def test_configured_queries(db):
    config = GraphConfig(
        base_url=BASE_URL,
        class_query=PagePropertyQuery(property="description", value="A living organism"),
        class_instances_query=ClassInstancesQuery(class_value="Property", instance_property="type"),
    )

    assert names(ClassSelector().records(db, config)) == ["Animal"]
    assert names(ClassInstancesSelector().records(db, config)) == []


def test_instance_is_linked_to_its_class(db, config):
    catalog = build_property_catalog(PropertySelector().records(db, config), config)

    triples = ClassInstancesSelector().collect(db, config, catalog)

    assert (BASE_URL + "Dog", BASE_URL + "type", BASE_URL + "Animal") in triples
    assert (BASE_URL + "Dog", "https://schema.org/color", "brown") in triples
    assert (BASE_URL + "Dog", "https://schema.org/sameAs", BASE_URL + "Hound") in triples


def test_selectors_do_not_share_records(db, config):
    first = ClassSelector().records(db, config)
    first[0]["type"].add("Mutated")

    second = ClassSelector().records(db, config)

    assert "Mutated" not in second[0]["type"]


@pytest.mark.parametrize(
    "selector, name",
    [
        (AdditionalPagesSelector(), "additional-pages"),
        (ClassSelector(), "classes"),
        (PropertySelector(), "properties"),
        (ClassInstancesSelector(), "class-instances"),
    ],
)
def test_selector_names(selector, name):
    assert selector.name == name
    assert name in repr(selector)
