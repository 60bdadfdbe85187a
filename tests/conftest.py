import logging

import pytest

from graph2rdf.config.settings import GraphConfig, Settings, reset_settings
from graph2rdf.loaders import GraphDatabase, PageEntity
from graph2rdf.utils.logging import remove_file_handler

BASE_URL = "https://x/#/page/"


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo root logger changes made by the CLI."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    remove_file_handler()
    root.handlers = handlers
    root.setLevel(level)
    logging.disable(logging.NOTSET)
    reset_settings()


@pytest.fixture
def config():
    return GraphConfig(base_url=BASE_URL)


@pytest.fixture
def settings(config):
    return Settings(graph=config)


def page(name, **properties):
    return PageEntity(original_name=name, properties=properties)


@pytest.fixture
def make_page():
    return page


@pytest.fixture
def pages():
    return [
        page("Class", description="A type of thing"),
        page("Property", description="A relation between things"),
        page("Animal", type={"Class"}, description="A living organism"),
        page("Plant", type={"Class"}),
        page("color", type={"Property"}, url="https://schema.org/color"),
        page("habitat", type={"Property"}),
        page("Dog", type={"Animal"}, color="brown", alias={"Hound", "Canine"}),
        page("Oak", type={"Plant"}, title="Quercus"),
        page("Notes", description="Not exported"),
    ]


@pytest.fixture
def db(pages):
    return GraphDatabase(pages)


@pytest.fixture
def markdown_graph(tmp_path):
    """A small markdown graph directory."""
    pages_dir = tmp_path / "graph" / "pages"
    pages_dir.mkdir(parents=True)
    (pages_dir / "Animal.md").write_text(
        "type:: [[Class]]\ndescription:: A living organism\n\n- Animals breathe\n",
        encoding="utf-8",
    )
    (pages_dir / "color.md").write_text(
        "type:: [[Property]]\nurl:: https://schema.org/color\n", encoding="utf-8"
    )
    (pages_dir / "Dog.md").write_text(
        "type:: [[Animal]]\ncolor:: brown\nalias:: Hound, Canine\n\n- Good boy\n",
        encoding="utf-8",
    )
    (pages_dir / "Class.md").write_text("description:: A type of thing\n", encoding="utf-8")
    (pages_dir / "Property.md").write_text("- no properties here\n", encoding="utf-8")
    return tmp_path / "graph"
