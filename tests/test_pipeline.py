import pytest
from rdflib import Graph, Literal, URIRef

from graph2rdf.config.settings import GraphConfig, PathsConfig, Settings
from graph2rdf.loaders import GraphDatabase
from graph2rdf.pipeline import ExportPipeline, ExportResult, export_graph

BASE_URL = "https://x/#/page/"


def test_create_triples_counts_every_selector(settings, db):
    result = ExportResult()

    triples = ExportPipeline(settings=settings, db=db).create_triples(result)

    assert result.pages_loaded == 9
    assert result.pages_by_selector == {
        "additional-pages": 2,
        "classes": 2,
        "properties": 2,
        "class-instances": 2,
    }
    assert result.triples_by_selector == {
        "additional-pages": 4,
        "classes": 5,
        "properties": 5,
        "class-instances": 7,
    }
    assert result.triples_generated == len(triples) == 21
    assert result.catalog_size == 4


def test_selector_output_order(settings, db):
    triples = ExportPipeline(settings=settings, db=db).create_triples()

    subjects = []
    for subject, _, _ in triples:
        if subject not in subjects:
            subjects.append(subject)

    assert subjects == [
        BASE_URL + name
        for name in ["Class", "Property", "Animal", "Plant", "color", "habitat", "Dog", "Quercus"]
    ]


def test_property_page_url_applies_to_every_page(settings, make_page):
    db = GraphDatabase(
        [
            make_page("color", type={"Property"}, url="https://schema.org/color"),
            make_page("Animal", type={"Class"}, color="varied"),
            make_page("Dog", type={"Animal"}, color="brown"),
        ]
    )

    triples = ExportPipeline(settings=settings, db=db).create_triples()

    color_triples = [t for t in triples if t[2] in ("varied", "brown")]
    assert {predicate for _, predicate, _ in color_triples} == {"https://schema.org/color"}
    assert not any(predicate == BASE_URL + "color" for _, predicate, _ in triples)


def test_execute_writes_turtle(settings, db, tmp_path):
    out = tmp_path / "graph.ttl"

    result = ExportPipeline(settings=settings, db=db).execute(out)

    assert result.output_file == str(out)
    assert result.format == "turtle"
    assert result.triples_written == 21
    assert result.completed_at is not None

    graph = Graph().parse(out, format="turtle")
    assert (URIRef(BASE_URL + "Dog"), URIRef(BASE_URL + "type"), URIRef(BASE_URL + "Animal")) in graph
    assert (URIRef(BASE_URL + "Animal"), URIRef("https://schema.org/name"), Literal("Animal")) in graph


def test_execute_loads_graph_from_settings(markdown_graph, tmp_path):
    settings = Settings(
        graph=GraphConfig(base_url=BASE_URL, format="n-triples"),
        paths=PathsConfig(graph_dir=markdown_graph),
    )

    result = export_graph(tmp_path / "graph.nt", settings=settings)

    content = (tmp_path / "graph.nt").read_text(encoding="utf-8")
    assert f"<{BASE_URL}Dog> <{BASE_URL}type> <{BASE_URL}Animal> ." in content
    assert f'<{BASE_URL}Dog> <https://schema.org/color> "brown" .' in content
    assert result.pages_by_selector["class-instances"] == 1


class FailingDatabase(GraphDatabase):
    def run(self, query):
        raise RuntimeError("query engine unavailable")


def test_query_failure_aborts_export(settings, tmp_path):
    out = tmp_path / "graph.ttl"

    with pytest.raises(RuntimeError, match="query engine unavailable"):
        ExportPipeline(settings=settings, db=FailingDatabase([])).execute(out)

    assert not out.exists()


def test_result_to_dict(settings, db):
    result = ExportResult()
    ExportPipeline(settings=settings, db=db).create_triples(result)
    result.finalize()

    data = result.to_dict()

    assert data["triples"]["generated"] == 21
    assert data["pages"]["by_selector"]["classes"] == 2
    assert data["timing"]["duration_seconds"] >= 0


def test_overlapping_selectors_write_each_triple_once(db, tmp_path):
    settings = Settings(graph=GraphConfig(base_url=BASE_URL, additional_pages={"Animal"}))

    result = ExportPipeline(settings=settings, db=db).execute(tmp_path / "graph.nt")

    # Animal is both an additional page and a class: its 3 triples repeat
    assert result.triples_by_selector["additional-pages"] == 3
    assert result.triples_generated - result.triples_written == 3
